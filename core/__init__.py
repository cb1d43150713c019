"""
Gemeinsame Infrastruktur: Logging und Konfiguration.
"""
