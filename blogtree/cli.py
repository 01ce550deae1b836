from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
import time
from pathlib import Path

from .bundles import bundle_elements, generate_bundles
from .config import SiteConfig, load_config
from .content import load_elements, new_post_record, slugify
from .contexts import collect_css, new_blog_context, new_navigation_context, new_pages_context
from .render import copy_static, write_text
from .utils import clean_output_dir, parse_bool


def output_path(output_dir: Path, fs_path: str, fs_filename: str) -> Path:
    return output_dir / fs_path.lstrip("/") / fs_filename


def build_site(args: argparse.Namespace, config: dict) -> int:
    posts_dir = Path(args.posts)
    pages_dir = Path(args.pages)
    static_dir = Path(args.static)
    output_dir = Path(args.output)

    if not posts_dir.exists():
        print(f"Posts directory not found: {posts_dir}", file=sys.stderr)
        sys.exit(1)

    site = SiteConfig.from_mapping({**config, "site_name": args.site_name, "domain": args.domain})

    try:
        posts = load_elements(posts_dir, "post", site)
        pages = load_elements(pages_dir, "page", site) if pages_dir.exists() else []
    except ValueError as exc:
        print(f"Cannot read source records: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Read {len(posts)} posts and {len(pages)} pages.")

    if args.clean:
        clean_output_dir(output_dir, Path.cwd())
    output_dir.mkdir(parents=True, exist_ok=True)

    bundles = generate_bundles(posts)
    navigation_pages = bundle_elements(
        bundles,
        site.domain,
        site.navigation_path,
        site.site_name,
        image_url=site.default_image_url,
    )
    contexts = [
        new_blog_context(site, posts),
        new_pages_context(site, pages),
        new_navigation_context(site, navigation_pages),
    ]

    written = 0
    seen: set[Path] = set()
    for context in contexts:
        for page in context.render():
            path = output_path(output_dir, page.fs_path, page.fs_filename)
            if path in seen:
                print(f"Warning: {path} is written more than once, the last page wins", file=sys.stderr)
            seen.add(path)
            print(f"Writing to {path}")
            write_text(path, page.html)
            written += 1

    write_text(output_dir / site.css_url.lstrip("/"), collect_css(contexts))
    if static_dir.exists():
        copy_static(static_dir, output_dir)
    return written


def main() -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args()
    config = load_config(Path(pre_args.config))

    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = config.get(key)
        return default if value is None else parse_bool(value)

    parser = argparse.ArgumentParser(description="Static blog generator for JSON post exports.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--posts", default=cfg_str("posts", "posts"), help="Directory containing JSON posts.")
    parser.add_argument("--pages", default=cfg_str("pages", "pages"), help="Directory containing JSON pages.")
    parser.add_argument("--static", default=cfg_str("static", "static"), help="Directory containing static assets.")
    parser.add_argument("--output", default=cfg_str("output", "dist"), help="Output directory for the site.")
    parser.add_argument("--site-name", default=cfg_str("site_name", "Blog"), help="Site title.")
    parser.add_argument("--domain", default=cfg_str("domain", ""), help="Production domain, e.g. https://example.com.")
    parser.add_argument(
        "--clean",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("clean", True),
        help="Clean output directory before build.",
    )
    args = parser.parse_args()
    start = time.perf_counter()
    written = build_site(args, config)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"{written} pages generated in: {args.output}")


def add_post_main() -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default="site.toml")
    pre_args, _ = pre_parser.parse_known_args()
    config = load_config(Path(pre_args.config))

    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    parser = argparse.ArgumentParser(description="Create a JSON post record from a Markdown file.")
    parser.add_argument("markdown", help="Markdown source of the post.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--posts", default=cfg_str("posts", "posts"), help="Directory receiving the JSON record.")
    parser.add_argument("--blog-url", default=cfg_str("blog_url", ""), help="Base URL of the blog posts.")
    parser.add_argument("--image-url", default="", help="URL of the post image.")
    parser.add_argument("--thumb-url", default="", help="URL of the post thumbnail.")
    args = parser.parse_args()

    source = Path(args.markdown)
    if not source.exists():
        print(f"Markdown file not found: {source}", file=sys.stderr)
        sys.exit(1)
    if not args.blog_url:
        print("A blog URL is required (--blog-url or blog_url in config).", file=sys.stderr)
        sys.exit(1)

    now = dt.datetime.now()
    filename = f"{now.strftime('%Y%m%d')}-{slugify(source.stem)}.json"
    record = new_post_record(
        source.read_text(encoding="utf-8"),
        args.blog_url,
        now,
        image_url=args.image_url,
        thumb_url=args.thumb_url,
        record_filename=filename,
    )
    target = Path(args.posts) / filename
    write_text(target, json.dumps(record, indent=2, ensure_ascii=False))
    print(f"Post record written to: {target}")
