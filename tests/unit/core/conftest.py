"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_GMI = """\
# Project Gemini

Gemini is a new internet protocol.

## Links
=> gemini://gemini.circumlunar.space/ Project home
=> https://example.com

### Code
```
print("hello")
  indented
```
"""


@pytest.fixture(name="sample_lines")
def sample_lines_fixture():
    return SAMPLE_GMI.splitlines()
