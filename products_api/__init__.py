"""
Products API.

A small FastAPI service whose product listing goes through a controller that
talks to the transport only via a ResponseSink, so it can be unit-tested with a
recording sink instead of a live HTTP response.
"""
