"""HTTP access to the stats server.

Only issues GET requests and decodes JSON; shapes are checked by the
aggregation layer.
"""
