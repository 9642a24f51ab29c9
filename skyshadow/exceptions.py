"""
Exceptions raised by the shadow analysis service layer

The geometry core itself never raises for malformed geometry; it skips or
falls back instead.
"""


class ShadowCalculationError(Exception):
    """Shadow calculation for a request could not be completed"""
