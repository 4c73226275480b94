# File: core/__init__.py
# Controller, background runner and error reporting for the quote screen.
# Import submodules directly (core.quote_controller, core.main_window) to keep
# widgets -> core.interfaces free of import cycles.
