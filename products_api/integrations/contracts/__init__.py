"""
Contracts (data models).

This folder defines the payload shapes and the sink interface shared by
controllers and transports:
- Product item format
- ResponseSink (emit a payload to whoever asked for it)

Why this exists:
- Both the recording and the real HTTP sink implement the same interface
- Controllers rely on a stable capability, not on a framework response object
"""
