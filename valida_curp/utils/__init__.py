"""
Request building, response decoding and payload transformation helpers
"""
