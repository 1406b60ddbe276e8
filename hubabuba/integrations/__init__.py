"""
Host framework integrations.

Import the module for your framework directly, they depend on the optional
``flask`` and ``fastapi`` extras.
"""
