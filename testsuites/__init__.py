"""
Test suites for the creai.mx marketing site.

    ui_testing/  Playwright framework, Page Objects and live browser tests
    unit/        offline tests of the framework against in-memory fakes
    config/      shared YAML configuration
"""
