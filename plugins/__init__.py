# plugins/__init__.py
# Each sub-module or sub-package here is a host plugin; see chatcmd.interface.loader.
