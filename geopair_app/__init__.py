"""
GeoPair batch tool: CSV in, normalized CSV out.

Entry point: geopair_app.run.main (console script `geopair`).
"""
