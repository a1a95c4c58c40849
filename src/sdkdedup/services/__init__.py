from .link_service import LinkService, PosixHardLinker, WindowsHardLinker, get_hard_linker

__all__ = ["LinkService", "PosixHardLinker", "WindowsHardLinker", "get_hard_linker"]
