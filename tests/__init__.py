"""
Test-Suite für den WFS-Import.
"""
