from .container import AppContainer, build_container
from .worker import UpdateCheckThread

__all__ = ["AppContainer", "build_container", "UpdateCheckThread"]
