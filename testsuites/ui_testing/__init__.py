"""
UI testing: Playwright framework, marketing site Page Objects and live smoke tests.
"""
