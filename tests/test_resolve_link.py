"""Tests for link construction and title derivation."""

from crates_llms_txt.item_kind import ItemKind
from crates_llms_txt.resolve_link import resolve_link
from crates_llms_txt.title_from_link import title_from_link

BASE = "https://docs.rs/clap/4.5.39"


def test_module_links() -> None:
    """Verify modules render to their index page."""
    assert resolve_link("clap", "4.5.39", ["clap"], ItemKind.MODULE) == (
        f"{BASE}/clap/index.html"
    )
    assert resolve_link("clap", "4.5.39", ["clap", "builder"], ItemKind.MODULE) == (
        f"{BASE}/clap/builder/index.html"
    )


def test_page_item_links() -> None:
    """Verify page-owning items get a kind-qualified file name."""
    assert resolve_link("clap", "4.5.39", ["clap", "Command"], ItemKind.STRUCT) == (
        f"{BASE}/clap/struct.Command.html"
    )
    assert resolve_link(
        "clap", "4.5.39", ["clap", "builder", "value_parser"], ItemKind.MACRO
    ) == (f"{BASE}/clap/builder/macro.value_parser.html")
    assert resolve_link("clap", "4.5.39", ["clap", "run"], ItemKind.FUNCTION) == (
        f"{BASE}/clap/fn.run.html"
    )


def test_proc_macro_links() -> None:
    """Verify derive and attribute macros use their own page prefixes."""
    derive = resolve_link("clap", "4.5.39", ["clap", "Parser"], ItemKind.DERIVE_MACRO)
    assert derive == f"{BASE}/clap/derive.Parser.html"
    link = resolve_link("clap", "4.5.39", ["clap", "main"], ItemKind.ATTRIBUTE_MACRO)
    assert link == f"{BASE}/clap/attr.main.html"
    assert title_from_link(link) == "main"


def test_same_name_different_kind_do_not_collide() -> None:
    """Verify a macro and a module sharing a name resolve apart."""
    module = resolve_link("std", "1.0.0", ["std", "vec"], ItemKind.MODULE)
    macro = resolve_link("std", "1.0.0", ["std", "vec"], ItemKind.MACRO)
    assert module != macro


def test_member_kind_falls_back_to_enclosing_path() -> None:
    """Verify members handed directly resolve to the page of their prefix."""
    link = resolve_link("clap", "4.5.39", ["clap", "Command", "new"], ItemKind.METHOD)
    other = resolve_link(
        "clap", "4.5.39", ["clap", "Command", "about"], ItemKind.METHOD
    )
    assert link == other == f"{BASE}/clap/Command/index.html"


def test_custom_base_url_and_empty_path() -> None:
    """Verify the base URL is configurable and an empty path stays total."""
    assert resolve_link(
        "demo", "0.1.0", [], ItemKind.MODULE, base_url="http://localhost:8000/"
    ) == ("http://localhost:8000/demo/0.1.0/demo/index.html")


def test_resolve_link_is_deterministic() -> None:
    """Verify identical inputs produce identical links."""
    args = ("clap", "4.5.39", ("clap", "Arg"), ItemKind.STRUCT)
    assert resolve_link(*args) == resolve_link(*args)


def test_title_from_link() -> None:
    """Verify titles drop the extension and the rustdoc kind prefix."""
    assert title_from_link(f"{BASE}/clap/struct.Command.html") == "Command"
    assert title_from_link(f"{BASE}/clap/fn.f.html") == "f"
    assert title_from_link(f"{BASE}/clap/builder/index.html") == "builder"
    assert title_from_link(f"{BASE}/clap/derive.Parser.html") == "Parser"
    assert title_from_link("https://docs.rs/clap/4.5.39") == "4.5.39"
    assert title_from_link("https://example.com/src/lib.rs") == "lib"
    assert title_from_link("") == ""
