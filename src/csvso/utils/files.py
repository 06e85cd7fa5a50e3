import os
import stat
import tempfile

from csvso.utils.exceptions import OutputWriteError


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def _target_mode(path: str) -> int:
    """
    Existing target keeps its mode; a new file gets 0o666 minus the umask.
    """
    if os.path.exists(path):
        return stat.S_IMODE(os.stat(path).st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text_atomic(path: str, content: str, encoding: str = "utf-8") -> None:
    """
    Write to a sibling temp file, then rename over the target.
    The target is either fully replaced or left untouched.
    """
    directory = os.path.dirname(os.path.abspath(path))
    try:
        ensure_dir(directory)
        mode = _target_mode(path)
        fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", dir=directory)
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}") from e

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(content)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException as e:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        if isinstance(e, OSError):
            raise OutputWriteError(f"Cannot write {path}: {e}") from e
        raise
