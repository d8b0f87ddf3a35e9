"""
Collaborators the Navigator depends on.

The workspace root provider and the document opener that hands files to
the user's editor.

Modified: 2026-10-18
"""

import logging
import os
from contextlib import nullcontext
from pathlib import Path
from typing import Callable, ContextManager, Optional

import click

from dirpanel.core.exceptions import FileOpenError

logger = logging.getLogger(__name__)


class WorkspaceProvider:
    """
    Supplies the workspace root, if any.

    Only a single root is supported.
    """

    def __init__(self, root: Optional[str] = None):
        """
        Initialize the provider.

        Args:
            root: Workspace root directory, or None for no workspace
        """
        self._root = os.path.abspath(os.path.expanduser(root)) if root else None

    @classmethod
    def from_settings(cls, settings, override: Optional[str] = None) -> "WorkspaceProvider":
        """
        Pick the workspace root from an explicit override, then settings,
        then the current working directory when enabled.
        """
        if override:
            return cls(override)
        if settings.workspace.root:
            return cls(settings.workspace.root)
        if settings.workspace.use_cwd:
            return cls(os.getcwd())
        return cls(None)

    @property
    def root(self) -> Optional[str]:
        return self._root

    def contains(self, path: str) -> bool:
        """
        Check whether ``path`` is the workspace root or lies below it.

        Matching is per path component: ``/srv/app-old`` is not inside
        ``/srv/app``.
        """
        if not self._root:
            return False
        if path == self._root:
            return True
        prefix = self._root if self._root.endswith(os.sep) else self._root + os.sep
        return path.startswith(prefix)


class EditorOpener:
    """Opens files in the user's editor through click.edit."""

    def __init__(
        self,
        editor: Optional[str] = None,
        suspend: Optional[Callable[[], ContextManager]] = None,
        launcher: Callable[..., object] = click.edit,
    ):
        """
        Initialize the opener.

        Args:
            editor: Editor executable; None falls back to $VISUAL/$EDITOR
            suspend: Context manager factory wrapped around the editor run,
                used by the TUI to hand the terminal over
            launcher: Function that runs the editor
        """
        self.editor = editor
        self.suspend = suspend or nullcontext
        self.launcher = launcher

    def open(self, path: str) -> None:
        """
        Open ``path`` in the editor.

        Raises:
            FileOpenError: If the file is missing or the editor fails
        """
        target = Path(path)
        if not target.exists():
            raise FileOpenError(path, f"{path} no longer exists")
        if not target.is_file():
            raise FileOpenError(path, f"{path} is not a regular file")

        logger.info(f"Opening {path} with {self.editor or 'default editor'}")
        try:
            with self.suspend():
                self.launcher(filename=str(target), editor=self.editor)
        except click.ClickException as e:
            raise FileOpenError(path, e.format_message()) from e
        except OSError as e:
            raise FileOpenError(path, str(e)) from e
