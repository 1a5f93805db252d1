"""Host applications: menus and the command line interface."""
