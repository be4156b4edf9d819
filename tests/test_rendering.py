from dressings.data import parse_dataset
from dressings.index import build_index
from dressings.rendering import FOCUSED_LINK_STYLE, LINK_STYLE, build_detail, format_recipe_title


def test_format_recipe_title() -> None:
    assert format_recipe_title("Garden", 32).plain == "Garden (page 32)"
    assert format_recipe_title("Garden", None).plain == "Garden"


def test_detail_sections_and_links(index) -> None:
    text, links = build_detail(index.find("Base"), index.usage_for("Base"), index.by_name)
    plain = text.plain

    assert plain.startswith("Base Dressing\nRecipe on page 10")
    assert "\n\nSalads\n  X (page 30)\n    Requires additional dressings. See Combo, page 12." in plain
    assert "\n\nBowls\n  Grain Bowl" in plain
    assert plain.endswith("\n\nDressings\n  Combo (page 12)")
    assert links == ["Combo", "Combo"]


def test_detail_lists_extra_components_as_links() -> None:
    idx = build_index(
        parse_dataset(
            {
                "dressings": [
                    {"name": "D"},
                    {"name": "E", "page": 3},
                    {"name": "G"},
                    {"name": "X", "components": ["D", "E", "G"]},
                ],
                "salads": [{"name": "S", "page": 9, "dressing": "X"}],
            }
        )
    )
    text, links = build_detail(idx.find("D"), idx.usage_for("D"), idx.by_name)
    assert "Requires additional dressings (E, G). See X." in text.plain
    assert links == ["E", "G", "X", "X"]


def test_only_non_empty_sections_render(index) -> None:
    text, links = build_detail(index.find("Ranch"), index.usage_for("Ranch"), index.by_name)
    assert "Salads" in text.plain
    assert "Bowls" not in text.plain
    assert "Dressings\n" not in text.plain
    assert links == []


def test_unused_dressing_page(index) -> None:
    text, links = build_detail(index.find("Lonely"), index.usage_for("Lonely"), index.by_name)
    assert text.plain == "Lonely Dressing\n\nNot used by any salad, bowl or dressing."
    assert links == []


def test_cursor_highlights_one_link(index) -> None:
    text, _ = build_detail(index.find("Base"), index.usage_for("Base"), index.by_name, cursor=1)
    styles = [span.style for span in text.spans if text.plain[span.start : span.end] == "Combo"]
    assert styles == [LINK_STYLE, FOCUSED_LINK_STYLE]
