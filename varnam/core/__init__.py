# varnam\core\__init__.py
"""
Core Layer.

Owns the lifecycle rules of the binding:
- Domain values and the error taxonomy (`domain`).
- The native engine boundary expressed as a Protocol (`ports`).
- The session that owns a native handle (`session`).
- Use cases that acquire sessions and enumerate schemes (`use_cases`).

Nothing in here imports ctypes or loads the native library.
"""
