"""Application package initializer.

Holds the greeting API (``app.interfaces.api``) and the page client
(``app.interfaces.web``); the runnable entrypoints live in ``main.py`` and
``frontend.py`` at the project root.
"""
