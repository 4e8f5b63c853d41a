"""
This package contains all modules related to decoding data returned by sensor
objects on the bus.

Sub-packages handle specific data formats:

- ``properties``: ``GetAll`` property bag decoding into sensor readings.
- ``signature``: D-Bus type signature validation.
"""
