from __future__ import annotations

import datetime as dt
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .components import SiteMeta
from .elements import Location, new_location
from .utils import parse_bool

try:
    import tomllib as toml
except ImportError:
    try:
        import tomli as toml
    except ImportError:  # pragma: no cover - optional dependency
        toml = None

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        if toml is None:
            print("TOML config requires tomllib (Python 3.11+) or tomli.", file=sys.stderr)
            sys.exit(1)
        try:
            data = toml.loads(text)
        except Exception as exc:  # pragma: no cover - depends on parser
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if not isinstance(data, dict):
            print(f"TOML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    if suffix in {".yml", ".yaml"}:
        if yaml is None:
            print("YAML config requires PyYAML.", file=sys.stderr)
            sys.exit(1)
        try:
            data = yaml.safe_load(text)
        except Exception as exc:  # pragma: no cover - depends on parser
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if data is None:
            return {}
        if not isinstance(data, dict):
            print(f"YAML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)


def locations_from_config(entries: object, domain: str) -> list[Location]:
    """Navigation entries are ``{title, url}`` tables; anything else is skipped."""
    if not isinstance(entries, list):
        return []
    locations = []
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("url"):
            print(f"Skipping navigation entry without url: {entry!r}", file=sys.stderr)
            continue
        url = str(entry["url"])
        title = str(entry.get("title") or url)
        locations.append(new_location(url, domain, title))
    return locations


@dataclass
class SiteConfig:
    site_name: str = "Blog"
    domain: str = ""
    language: str = "en"
    blog_url: str = ""
    twitter_handle: str = ""
    twitter_card_type: str = "summary"
    og_type: str = "article"
    fb_page_url: str = ""
    content_section: str = ""
    content_tags: str = ""
    css_url: str = "/styles.css"
    home_url: str = "/"
    disqus_shortname: str = ""
    default_image_url: str = ""
    copyright_holder: str = ""
    copyright_year: str = ""
    cookie_notice: str = ""
    navigation_path: str = "/"
    show_gallery: bool = False
    main_navigation: list[Location] = field(default_factory=list)
    footer_navigation: list[Location] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: dict) -> SiteConfig:
        def cfg_str(key: str, default: str) -> str:
            value = data.get(key)
            return default if value is None else str(value)

        domain = cfg_str("domain", "").rstrip("/")
        return cls(
            site_name=cfg_str("site_name", "Blog"),
            domain=domain,
            language=cfg_str("language", "en"),
            blog_url=cfg_str("blog_url", ""),
            twitter_handle=cfg_str("twitter_handle", ""),
            twitter_card_type=cfg_str("twitter_card_type", "summary"),
            og_type=cfg_str("og_type", "article"),
            fb_page_url=cfg_str("fb_page_url", ""),
            content_section=cfg_str("content_section", ""),
            content_tags=cfg_str("content_tags", ""),
            css_url=cfg_str("css_url", "/styles.css"),
            home_url=cfg_str("home_url", "/"),
            disqus_shortname=cfg_str("disqus_shortname", ""),
            default_image_url=cfg_str("default_image_url", ""),
            copyright_holder=cfg_str("copyright_holder", ""),
            copyright_year=cfg_str("copyright_year", str(dt.datetime.now().year)),
            cookie_notice=cfg_str("cookie_notice", ""),
            navigation_path=cfg_str("navigation_path", "/"),
            show_gallery=parse_bool(data.get("show_gallery")),
            main_navigation=locations_from_config(data.get("main_navigation"), domain),
            footer_navigation=locations_from_config(data.get("footer_navigation"), domain),
        )

    def site_meta(self) -> SiteMeta:
        return SiteMeta(
            site_name=self.site_name,
            twitter_handle=self.twitter_handle,
            twitter_card_type=self.twitter_card_type,
            og_type=self.og_type,
            fb_page_url=self.fb_page_url,
            content_section=self.content_section,
            content_tags=self.content_tags,
            home_url=self.home_url,
        )
