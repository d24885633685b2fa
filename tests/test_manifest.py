from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

from crudgen.binding import resources
from crudgen.config import bind_manifest, describe_manifest, load_manifest


def _write(tmp_path: Path, content: str, name: str = "resources.yaml") -> Path:
    path = tmp_path / name
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def _write_app(tmp_path: Path, package: str) -> None:
    root = tmp_path / "app_src" / package
    root.mkdir(parents=True)
    (root / "__init__.py").write_text("", encoding="utf-8")
    (root / "models.py").write_text(
        textwrap.dedent(
            """
            from dataclasses import dataclass
            from typing import Optional


            @dataclass
            class BlogPost:
                title: str
                id: Optional[int] = None
            """
        ),
        encoding="utf-8",
    )
    (root / "blog.py").write_text('"""Host module for generated functions."""\n', encoding="utf-8")


def test_load_manifest_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        resources:
          - schema: app.models:User
          - schema: app.models.BlogPost
            repository: archive
            host: app.blog
            suffix: false
            only: [all, get]
        """,
    )
    manifest = load_manifest(str(path))
    assert manifest.repository == "memory"
    assert manifest.source == path.resolve()
    first, second = manifest.resources
    assert first.repository == "memory"
    assert first.suffix is True
    assert first.selector() is None
    assert second.repository == "archive"
    assert second.options() == {"suffix": False, "selector": {"only": ["all", "get"]}}


def test_schema_missing_resources(tmp_path: Path) -> None:
    path = _write(tmp_path, "repository: memory\n")
    with pytest.raises(ValueError) as exc:
        load_manifest(str(path))
    assert "resources" in str(exc.value)


def test_schema_rejects_unknown_preset_and_keys(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        resources:
          - schema: app.models:User
            preset: write
            colour: blue
        """,
    )
    with pytest.raises(ValueError) as exc:
        load_manifest(str(path))
    message = str(exc.value)
    assert "resources/0" in message
    assert "colour" in message


def test_only_one_selector_per_resource(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        resources:
          - schema: app.models:User
            only: [all]
            except: [get]
        """,
    )
    with pytest.raises(ValueError) as exc:
        load_manifest(str(path))
    assert "only one of only, except" in str(exc.value)


def test_duplicate_resource_rejected(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        resources:
          - schema: app.models:User
            host: app.accounts
          - schema: app.models:User
            host: app.accounts
        """,
    )
    with pytest.raises(ValueError) as exc:
        load_manifest(str(path))
    assert "Duplicate resource" in str(exc.value)


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(ValueError) as exc:
        load_manifest(str(path))
    assert "mapping" in str(exc.value)


def test_describe_and_bind_manifest(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "path", list(sys.path))
    _write_app(tmp_path, "manifest_app")
    path = _write(
        tmp_path,
        """
        paths: [app_src]
        resources:
          - schema: manifest_app.models:BlogPost
            host: manifest_app.blog
            preset: read_write
        """,
    )
    manifest = load_manifest(str(path))

    (report,) = describe_manifest(manifest)
    assert report.schema == "BlogPost"
    assert report.suffix == "blog_post"
    assert report.host == "manifest_app.blog"
    assert len(report.entries) == 10
    assert "all_blog_posts/1" in report.descriptions()

    (bound,) = bind_manifest(manifest)
    import manifest_app.blog as blog

    post = blog.create_blog_post_or_raise({"title": "Hello"})
    assert blog.all_blog_posts() == [post]
    assert resources(blog) == [bound]
    assert not hasattr(blog, "delete_blog_post")


def test_bind_requires_host(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "path", list(sys.path))
    _write_app(tmp_path, "hostless_app")
    path = _write(
        tmp_path,
        """
        paths: [app_src]
        resources:
          - schema: hostless_app.models:BlogPost
        """,
    )
    with pytest.raises(ValueError) as exc:
        bind_manifest(load_manifest(str(path)))
    assert "no host" in str(exc.value)
