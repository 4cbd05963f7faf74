"""
Conversions between command/report values and raw register payloads.

Sub-packages handle each direction:

- ``registers``: decimal-digit parameter values to register payloads.
- ``report``: device responses to hexadecimal report text.
"""
