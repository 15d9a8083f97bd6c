# plugins/dice/__init__.py
GUID = "chatcmd.dice"
NAME = "Dice"
VERSION = "1.0.0"
