"""Template stores: where SVG fragment text comes from."""

from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path


TEMPLATE_SUFFIX = ".svg.hbs"


class TemplateNotFoundError(LookupError):
    """Raised when a store has no fragment for a logical template path."""

    def __init__(self, path: str, location: str) -> None:
        self.path = path
        self.location = location
        super().__init__(f"Template '{path}' not found in {location}")


class TemplateStore(ABC):
    """Abstract base class for template sources.

    Logical paths look like 'common/Nose' or 'female/hair/TypeB'; a store
    maps them to `<path>.svg.hbs` files in its own location.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where templates are read from."""
        ...

    @abstractmethod
    def load(self, path: str) -> str:
        """Return the UTF-8 fragment text for a logical template path.

        Raises:
            TemplateNotFoundError: If the fragment does not exist
        """
        ...


class PackageTemplateStore(TemplateStore):
    """Reads the templates shipped inside the avatar_factory package."""

    def __init__(self, package: str = "avatar_factory", directory: str = "templates") -> None:
        self._package = package
        self._directory = directory

    @property
    def location(self) -> str:
        return f"package:{self._package}/{self._directory}"

    def load(self, path: str) -> str:
        resource = resources.files(self._package).joinpath(
            f"{self._directory}/{path}{TEMPLATE_SUFFIX}"
        )
        if not resource.is_file():
            raise TemplateNotFoundError(path, self.location)
        return resource.read_text(encoding="utf-8")


class DirectoryTemplateStore(TemplateStore):
    """Reads templates from a directory tree on disk."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def location(self) -> str:
        return str(self._root)

    def load(self, path: str) -> str:
        file_path = self._root / f"{path}{TEMPLATE_SUFFIX}"
        if not file_path.is_file():
            raise TemplateNotFoundError(path, self.location)
        return file_path.read_text(encoding="utf-8")
