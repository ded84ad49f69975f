from typing import List, Optional

from wordstats.common.exceptions import FileReadError


def read_file(file_path: str, encodings: Optional[List[str]] = None) -> str:
    """Read a whole text file.

    By default the file is decoded as UTF-8 and every malformed byte
    sequence is replaced with U+FFFD, so bytes are never merged into
    characters of another encoding.

    Args:
        file_path (str): Path to the file to read
        encodings (List[str]): Encodings to try strictly, in sequence; the
            first one that decodes the file wins

    Returns:
        str: The file contents as a string

    Raises:
        FileReadError: If the file cannot be opened, or cannot be decoded
            with any of the given encodings
    """
    if not encodings:
        try:
            with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
                return f.read()
        except OSError as e:
            raise FileReadError(file_path, str(e)) from e

    for encoding in encodings:
        try:
            with open(file_path, 'r', encoding=encoding) as f:
                return f.read()
        except UnicodeDecodeError:
            continue
        except OSError as e:
            raise FileReadError(file_path, str(e)) from e

    raise FileReadError(
        file_path,
        f"cannot decode with any of: {', '.join(encodings)}")
