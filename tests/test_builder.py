import logging
from types import SimpleNamespace

import pytest

from fastapi_hal import BuilderStateError, RepresentationBuilder
from fastapi_hal.core.representation import Representation

NAVIGATION_RELS = ("first", "previous", "current", "next", "last")


def _href(representation, rel):
    link = representation.get_link(rel)
    return link.href if link else None


def test_build_without_pagination_uses_plain_self_uri():
    representation = RepresentationBuilder.new_instance("http://x/items").build()

    assert representation.self_link.href == "http://x/items"
    for rel in NAVIGATION_RELS:
        assert representation.get_link(rel) is None


def test_build_with_pagination_adds_navigation_links(second_page):
    representation = (
        RepresentationBuilder.new_instance("http://x/items")
        .with_pagination(second_page)
        .build()
    )

    assert representation.self_link.href == "http://x/items?pn=2&ps=10"
    assert _href(representation, "first") == "http://x/items?pn=1&ps=10"
    assert _href(representation, "previous") == "http://x/items?pn=1&ps=10"
    assert _href(representation, "current") == "http://x/items?pn=1&ps=10"
    assert _href(representation, "next") == "http://x/items?pn=3&ps=10"
    assert _href(representation, "last") == "http://x/items?pn=5&ps=10"


def test_pagination_accepts_any_descriptor_with_page_attributes():
    descriptor = SimpleNamespace(
        current_page=4, previous_page=3, next_page=5, total_pages=9, results_per_page=25
    )
    representation = (
        RepresentationBuilder("http://x/items").with_pagination(descriptor).build()
    )

    assert representation.self_link.href == "http://x/items?pn=4&ps=25"
    assert _href(representation, "current") == "http://x/items?pn=3&ps=25"
    assert _href(representation, "last") == "http://x/items?pn=9&ps=25"


def test_navigation_links_keep_existing_query_of_self_uri(second_page):
    representation = (
        RepresentationBuilder("http://x/items?sort=name").with_pagination(second_page).build()
    )

    assert representation.self_link.href == "http://x/items?sort=name&pn=2&ps=10"
    assert _href(representation, "first") == "http://x/items?sort=name&pn=1&ps=10"


def test_page_parameter_names_follow_settings(monkeypatch, second_page):
    monkeypatch.setenv("HAL_PAGE_NUMBER_PARAM", "page")
    monkeypatch.setenv("HAL_PAGE_SIZE_PARAM", "size")

    representation = RepresentationBuilder("http://x/items").with_pagination(second_page).build()

    assert representation.self_link.href == "http://x/items?page=2&size=10"


def test_with_pagination_none_clears_previous_value(second_page):
    representation = (
        RepresentationBuilder("http://x/items")
        .with_pagination(second_page)
        .with_pagination(None)
        .build()
    )

    assert representation.self_link.href == "http://x/items"
    assert representation.get_link("first") is None


def test_links_are_attached_by_relation():
    representation = (
        RepresentationBuilder("http://x/items")
        .with_links({"up": "http://x", "search": "http://x/items{?q}"})
        .build()
    )

    assert _href(representation, "up") == "http://x"
    assert representation.get_link("up").templated is None
    assert representation.get_link("search").templated is True


def test_with_links_replaces_previous_mapping():
    representation = (
        RepresentationBuilder("http://x/items")
        .with_links({"up": "http://x"})
        .with_links({"help": "http://x/help"})
        .build()
    )

    assert representation.get_link("up") is None
    assert _href(representation, "help") == "http://x/help"


def test_embedded_children_keep_order_under_one_relation():
    first = Representation("http://x/items/1")
    second = Representation("http://x/items/2")

    representation = (
        RepresentationBuilder("http://x/items")
        .with_embedded({"children": [first, second]})
        .build()
    )

    assert representation.get_embedded("children") == [first, second]
    rendered = representation.to_dict()["_embedded"]["children"]
    assert [child["_links"]["self"]["href"] for child in rendered] == [
        "http://x/items/1",
        "http://x/items/2",
    ]


def test_with_embedded_replaces_previous_mapping():
    child = Representation("http://x/items/1")
    representation = (
        RepresentationBuilder("http://x/items")
        .with_embedded({"old": [child]})
        .with_embedded({"children": [child]})
        .build()
    )

    assert representation.get_embedded("old") == []
    assert representation.get_embedded("children") == [child]


def test_bean_becomes_primary_data():
    bean = {"name": "Widget", "price": 10}

    representation = RepresentationBuilder("http://x/items/1", bean).build()

    assert representation.bean is bean
    assert representation.to_dict() == {
        "_links": {"self": {"href": "http://x/items/1"}},
        "name": "Widget",
        "price": 10,
    }


def test_absent_bean_attaches_no_data():
    representation = RepresentationBuilder("http://x/items/1").build()

    assert representation.bean is None
    assert representation.properties == {}


def test_representation_is_a_snapshot_of_configuration():
    links = {"up": "http://x"}
    children = [Representation("http://x/items/1")]
    builder = RepresentationBuilder("http://x/items").with_links(links).with_embedded({"children": children})

    representation = builder.build()
    links["later"] = "http://x/later"
    children.append(Representation("http://x/items/2"))

    assert representation.get_link("later") is None
    assert len(representation.get_embedded("children")) == 1


def test_build_twice_fails():
    builder = RepresentationBuilder("http://x/items")
    builder.build()

    assert builder.is_built
    with pytest.raises(BuilderStateError, match="Build process is complete"):
        builder.build()


@pytest.mark.parametrize(
    "configure",
    [
        lambda builder: builder.with_pagination(None),
        lambda builder: builder.with_links({"up": "http://x"}),
        lambda builder: builder.with_embedded({}),
    ],
    ids=["pagination", "links", "embedded"],
)
def test_configuration_after_build_fails(configure, caplog):
    builder = RepresentationBuilder("http://x/items")
    builder.build()

    with caplog.at_level(logging.WARNING, logger="fastapi_hal.core.builder"):
        with pytest.raises(BuilderStateError):
            configure(builder)

    assert "finished builder" in caplog.text
