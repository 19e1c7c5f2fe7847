"""Business-logic layer between routers and the SQLite alert store.

- alerts_service.py (write one alert, range query by service and timestamp)
"""

# Import side-effects are intentionally avoided here; modules are imported by routers as needed.
