"""Core application components: configuration, exceptions, middleware, events."""
