import pytest

from testsuites.ui_testing.framework.dropdowns import CustomDropdown, Dropdown, NativeDropdown
from testsuites.ui_testing.framework.errors import ElementNotFoundError, WaitTimeoutError
from testsuites.ui_testing.framework.waits import ExplicitWait
from testsuites.unit.fakes import FakeElement, FakeLocator, FakePage

PARENT = "//div[@id='country']"
ITEMS = "//div[@id='country']//li"


def native(**kwargs):
    element = FakeElement(tag="select", options=["Red", "Green", "Blue"], **kwargs)
    return element, NativeDropdown(FakeLocator([element]))


def test_both_variants_are_dropdowns():
    assert issubclass(NativeDropdown, Dropdown)
    assert issubclass(CustomDropdown, Dropdown)


def test_single_select_replaces_selection():
    element, dropdown = native(selected=["Red"])
    dropdown.select("Blue")
    assert element.selected == ["Blue"]
    assert dropdown.first_selected_text() == "Blue"


def test_multi_select_adds_to_selection():
    element, dropdown = native(selected=["Red"], multiple=True)
    assert dropdown.is_multiple()

    dropdown.select("Blue")
    dropdown.select("Blue")

    assert element.selected == ["Red", "Blue"]


def test_deselect_one_and_all():
    element, dropdown = native(selected=["Red", "Green"], multiple=True)

    dropdown.deselect("Red")
    assert element.selected == ["Green"]

    dropdown.deselect_all()
    assert element.selected == []
    assert element.scripts[-1][1] is None


def test_first_selected_text_without_selection_raises():
    _, dropdown = native()
    with pytest.raises(ElementNotFoundError):
        dropdown.first_selected_text()


def custom(page, pauses):
    return CustomDropdown(
        page,
        PARENT,
        ITEMS,
        wait=ExplicitWait(timeout=0.05, poll_interval=0.01),
        pause=lambda: pauses.append(1),
    )


def test_custom_dropdown_opens_and_clicks_matching_item():
    page = FakePage()
    items = [FakeElement(" Vietnam "), FakeElement("France")]
    page.add(PARENT, FakeElement(on_click=lambda: page.add(ITEMS, *items)))
    pauses = []

    custom(page, pauses).select("Vietnam")

    assert page.dom[PARENT][0].clicks == 1
    assert items[0].clicks == 1
    assert ("scroll_into_view",) in items[0].events
    assert items[1].clicks == 0
    assert pauses == [1, 1]


def test_custom_dropdown_clicks_are_bounded_by_wait_timeout():
    page = FakePage()
    item = FakeElement("France")
    page.add(PARENT, FakeElement(on_click=lambda: page.add(ITEMS, item)))

    custom(page, []).select("France")

    assert page.dom[PARENT][0].click_timeouts == [pytest.approx(50)]
    assert item.click_timeouts == [pytest.approx(50)]


def test_custom_dropdown_without_match_raises():
    page = FakePage()
    page.add(PARENT, FakeElement())
    page.add(ITEMS, FakeElement("France"))

    with pytest.raises(ElementNotFoundError, match="Atlantis"):
        custom(page, []).select("Atlantis")


def test_custom_dropdown_items_never_rendered():
    page = FakePage()
    page.add(PARENT, FakeElement())

    with pytest.raises(WaitTimeoutError):
        custom(page, []).select("France")


def test_select_many_clicks_each_match_once():
    page = FakePage()
    items = [FakeElement("A"), FakeElement("B"), FakeElement("C")]
    page.add(PARENT, FakeElement())
    page.add(ITEMS, *items)

    custom(page, []).select_many("A", "C", "A")

    assert [item.clicks for item in items] == [1, 0, 1]
