"""
Tests for the services that call through the registry.
"""

import pytest
from unittest.mock import Mock

from interfaces import IRecordStore, IPrinter, Document, Credentials
from providers.capabilities import AREA, PERSISTENCE, LOGGING, PRINTING, SCANNING, AUTHENTICATION
from providers.exceptions import UnknownProvider, ProviderFailure
from providers.area import TriangleAreaProvider
from providers.persistence import InMemoryRecordStore
from providers.log_sinks import DatabaseLogSink
from providers.printing import SpoolPrinter, FlatbedScanner
from providers.auth import PasswordAuthenticator, TokenAuthenticator
from services import (
    AreaService, AuditService, DocumentService,
    AuthenticationService, CartItem, ShoppingCart, CheckoutService
)


class TestAreaService:
    """Test total area computation."""

    def test_total_area(self, area_registry):
        """Test summing heterogeneous shapes."""
        service = AreaService(area_registry)
        shapes = [("rectangle", {"width": 5, "height": 10}), ("circle", {"radius": 7})]

        assert service.total_area(shapes) == pytest.approx(50 + 153.938, abs=1e-3)

    def test_new_shape_without_service_changes(self, area_registry):
        """Test a new shape kind works without touching the service."""
        service = AreaService(area_registry)
        area_registry.register(AREA, "triangle", TriangleAreaProvider())

        breakdown = service.shape_areas([("triangle", {"base": 2, "height": 2})])

        assert breakdown == [{"kind": "triangle", "params": {"base": 2, "height": 2}, "area": 2}]

    def test_empty_shapes(self, area_registry):
        """Test the total of no shapes."""
        assert AreaService(area_registry).total_area([]) == 0

    def test_unknown_shape(self, area_registry):
        """Test an unwired shape kind."""
        with pytest.raises(UnknownProvider):
            AreaService(area_registry).total_area([("hexagon", {"side": 1})])


class TestAuditService:
    """Test logging and record keeping."""

    def test_log_to_default_and_named_sink(self, registry, file_sink):
        """Test sink selection."""
        store = InMemoryRecordStore()
        registry.register(LOGGING, "file", file_sink)
        registry.register(LOGGING, "database", DatabaseLogSink(store))
        service = AuditService(registry, default_sink="file", default_store="memory")

        service.log("to file")
        service.log("to database", sink="database")

        with open(file_sink.file_path, encoding="utf-8") as f:
            assert "to file" in f.read()
        assert store.all_records()[0]["data"]["message"] == "to database"

    def test_log_failure_propagates(self, registry, file_sink):
        """Test failing sinks are not silenced."""
        registry.register(LOGGING, "file", file_sink)

        with pytest.raises(ProviderFailure):
            AuditService(registry, default_sink="file").log(None)

    def test_record(self, registry):
        """Test records are saved to the chosen store."""
        store = InMemoryRecordStore()
        registry.register(PERSISTENCE, "memory", store)

        record = AuditService(registry, default_store="memory").record("event", {"a": 1})

        assert store.load(record.record_id) == record

    def test_record_rejected(self, registry):
        """Test a store that reports failure."""
        store = Mock(spec=IRecordStore)
        store.save.return_value = False
        registry.register(PERSISTENCE, "broken", store)

        with pytest.raises(IOError):
            AuditService(registry).record("event", {}, store="broken")


class TestDocumentService:
    """Test printing and scanning dispatch."""

    def test_print_and_scan(self, registry):
        """Test documents reach the selected devices."""
        spool = SpoolPrinter()
        registry.register(PRINTING, "spool", spool)
        registry.register(SCANNING, "flatbed", FlatbedScanner())
        service = DocumentService(registry, default_printer="spool", default_scanner="flatbed")
        document = Document(title="Memo", content="hello")

        assert service.print_document(document) == "spool-1"
        assert spool.drain() == [document]
        assert "hello" in service.scan_document(document)

    def test_printer_without_scanning(self, registry):
        """Test a printer-only setup has no scanner."""
        registry.register(PRINTING, "spool", SpoolPrinter())

        with pytest.raises(UnknownProvider):
            DocumentService(registry).scan_document(Document(title="Memo"), scanner="spool")


class TestAuthenticationService:
    """Test login dispatch."""

    @pytest.fixture
    def service(self, registry):
        """Authentication service with password and token methods."""
        passwords = PasswordAuthenticator()
        passwords.add_user("alice", "s3cret")
        registry.register(AUTHENTICATION, "password", passwords)
        registry.register(AUTHENTICATION, "token", TokenAuthenticator(tokens=["tok"]))
        return AuthenticationService(registry)

    def test_login(self, service):
        """Test each method."""
        assert service.login("password", Credentials("alice", "s3cret")) is True
        assert service.login("password", Credentials("alice", "nope")) is False
        assert service.login("token", Credentials("svc", "tok")) is True

    def test_non_ascii_token_rejected(self, service):
        """Test a non-ASCII secret is refused rather than failing."""
        assert service.login("token", Credentials("svc", "päss")) is False

    def test_unknown_method(self, service):
        """Test an unwired method."""
        with pytest.raises(UnknownProvider):
            service.login("oauth", Credentials("alice", "s3cret"))


class TestShoppingCart:
    """Test cart bookkeeping."""

    def test_total(self):
        """Test totals and merging identical lines."""
        cart = ShoppingCart()
        cart.add_item(CartItem("apple", 0.5, 4))
        cart.add_item(CartItem("apple", 0.5, 2))
        cart.add_item(CartItem("pear", 1.25))

        assert len(cart.items) == 2
        assert cart.total() == 4.25

    def test_remove_item(self):
        """Test removing products."""
        cart = ShoppingCart([CartItem("apple", 1.0)])

        assert cart.remove_item("apple") is True
        assert cart.remove_item("apple") is False
        assert cart.is_empty()

    def test_invalid_items(self):
        """Test item validation."""
        with pytest.raises(ValueError):
            CartItem("apple", -1.0)
        with pytest.raises(ValueError):
            CartItem("apple", 1.0, 0)


class TestCheckoutService:
    """Test checkout through persistence and printing providers."""

    def test_checkout(self, registry):
        """Test the order is saved and the invoice printed."""
        store = InMemoryRecordStore()
        spool = SpoolPrinter()
        registry.register(PERSISTENCE, "memory", store)
        registry.register(PRINTING, "spool", spool)
        cart = ShoppingCart([CartItem("book", 12.5, 2)])

        result = CheckoutService(registry, store="memory", printer="spool").checkout(cart)

        assert result["total"] == 25.0
        assert result["print_job"] == "spool-1"
        saved = store.load(result["order_id"])
        assert saved.kind == "order"
        assert saved.data["total"] == 25.0
        invoice = spool.drain()[0]
        assert invoice.title == f"Invoice {result['order_id']}"
        assert "Total: 25.00" in invoice.content

    def test_checkout_empty_cart(self, registry):
        """Test empty carts are refused."""
        with pytest.raises(ValueError):
            CheckoutService(registry).checkout(ShoppingCart())

    def test_printer_failure_surfaces(self, registry):
        """Test a broken printer surfaces as ProviderFailure."""
        printer = Mock(spec=IPrinter)
        printer.print_document.side_effect = RuntimeError("paper jam")
        registry.register(PERSISTENCE, "memory", InMemoryRecordStore())
        registry.register(PRINTING, "broken", printer)

        with pytest.raises(ProviderFailure) as exc_info:
            CheckoutService(registry, store="memory", printer="broken").checkout(
                ShoppingCart([CartItem("book", 1.0)])
            )
        assert str(exc_info.value.cause) == "paper jam"
