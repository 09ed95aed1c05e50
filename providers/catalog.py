"""
Providers wired into the registry at startup, keyed by capability and discriminator.
Entries are dotted paths so a provider is only imported when it is enabled.
"""

PROVIDER_CATALOG = {
    'area': {
        'rectangle': 'providers.area.shape_providers.RectangleAreaProvider',
        'circle': 'providers.area.shape_providers.CircleAreaProvider',
        'triangle': 'providers.area.shape_providers.TriangleAreaProvider',
        'square': 'providers.area.shape_providers.SquareAreaProvider'
    },
    'persistence': {
        'memory': 'providers.persistence.memory_store.InMemoryRecordStore',
        'json_file': 'providers.persistence.json_file_store.JsonFileRecordStore',
        'redis': 'providers.persistence.redis_store.RedisRecordStore'
    },
    'logging': {
        'console': 'providers.log_sinks.sinks.ConsoleLogSink',
        'file': 'providers.log_sinks.sinks.FileLogSink'
        # 'database' needs a record store and is wired by ComponentFactory
    },
    'printing': {
        'console': 'providers.printing.printers.ConsolePrinter',
        'spool': 'providers.printing.printers.SpoolPrinter'
    },
    'scanning': {
        'flatbed': 'providers.printing.scanners.FlatbedScanner'
    },
    'authentication': {
        'password': 'providers.auth.authenticators.PasswordAuthenticator',
        'token': 'providers.auth.authenticators.TokenAuthenticator'
    }
}
