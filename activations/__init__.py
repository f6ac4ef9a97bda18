"""
Activations module - activation verification.

This module handles:
- Activation entity (remote registry record)
- License registry client
- Verification of a serial number and activation token
"""
