"""Library to integrate with the Nissan Carwings (NissanConnect EV) service.

This library provides a Python interface to the Carwings telemetry service,
with abilities to authenticate, request a refresh of the data reported by
the vehicle and read back the battery and charging status.

NOTE: This work is not officially supported by Nissan and functionality
can stop working at any time without warning.

"""
