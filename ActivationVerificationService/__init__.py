"""
Activation Verification Service Django project.
"""
