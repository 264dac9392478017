"""
shared fixtures for wordrank tests
"""

import pytest


@pytest.fixture
def write_wordlist(tmp_path):
    """write lines to a word list file and return its path"""
    def _write(lines, name="wordlist.txt"):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path
    return _write
