# plugins/text/__init__.py
GUID = "chatcmd.text"
NAME = "Text Tools"
VERSION = "1.0.0"
