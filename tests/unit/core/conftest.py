"""Shared fixtures for core unit tests"""

import pytest

from bookwiki.core.rewrite import make_parser


SAMPLE_MD = """\
# Огаро

Главный герой.

```infobox
Имя: Огаро
Статус: Жив
```

## Способности

- Фантоматика
- Чтение искажений
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser("gfm-like")


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
