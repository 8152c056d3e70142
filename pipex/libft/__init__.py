"""Small helpers for characters, strings, linked lists, line reading and formatted output."""