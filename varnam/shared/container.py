# varnam\shared\container.py
from dependency_injector import containers, providers

from varnam.adapters.engines.libvarnam import LibVarnamEngine
from varnam.core.use_cases.list_schemes import ListSchemes
from varnam.core.use_cases.open_session import OpenSession
from varnam.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the binding.
    """

    # 1. Configuration
    config = providers.Object(settings)

    # 2. Native Engine (Singleton: the shared library is loaded once, on first use)
    native_engine = providers.Singleton(
        LibVarnamEngine,
        library_path=config.provided.VARNAM_LIBRARY_PATH,
        library_names=config.provided.VARNAM_LIBRARY_NAMES,
    )

    # 3. Use Cases (Factory: stateless, new instance per call)
    open_session = providers.Factory(
        OpenSession,
        engine=native_engine,
    )

    list_schemes = providers.Factory(
        ListSchemes,
        engine=native_engine,
        strict=config.provided.STRICT_SCHEME_LISTING,
    )

# Instantiate the container for global access (api, cli)
container = Container()
