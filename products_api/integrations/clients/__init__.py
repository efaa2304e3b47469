"""ResponseSink implementations (mock and real HTTP)."""
