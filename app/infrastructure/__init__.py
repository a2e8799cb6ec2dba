"""Infrastructure modules for the locale negotiation service.

Centralized infrastructure components:
- configuration: Settings management (Settings, LocaleSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Dictionary store, locale resolution and token translation
- services: Dependency injection services (SettingsDep, TranslatorDep, get_settings)
"""
