"""
Tracker operation layer.

Each operation encodes one tracker verb into a Request, performs it through
a shared RequestHandler and decodes the Response into typed results.
"""
