# varnam\shared\__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by the core and the adapters:
- Configuration management
- Structured logging
- Dependency Injection wiring
"""
