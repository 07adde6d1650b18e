from pathlib import Path

import pytest

ROAST_MD = """# 🔥 Ultimate Roast Collection 🔥

Intro text that sits before any section and should be ignored.

---

## English Roasts

1. Your code is so messy, even the linter gave up.
2. You write tests the way politicians keep promises.
Too short.

---

## Hinglish Roasts

1. Bhai tera code dekh ke compiler bhi ro pada.
2. Itna slow hai tu, loading screen bhi bore ho gaya.

---

## Memes Link

- Drake meme: see below
https://i.imgflip.com/30b1gx.jpg
https://i.imgflip.com/1ur9b0.jpg
"""

RULES_YAML = """english_header: burns
hinglish_header: desi burns
memes_header: gifs
min_length: 4
"""


@pytest.fixture(scope="module")
def docs_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the sample documents once per module."""
    dir_path: Path = tmp_path_factory.mktemp("docs")

    (dir_path / "Roast.md").write_text(ROAST_MD, encoding="utf-8")
    (dir_path / "Custom.md").write_text(
        "## Desi Burns\nChal hatt\n## Burns\nBooo\n## Gifs\nhttp://g.example/1\n",
        encoding="utf-8",
    )
    (dir_path / "rules.yaml").write_text(RULES_YAML, encoding="utf-8")

    return dir_path
