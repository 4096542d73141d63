from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from uitree.config import UIConfig
from uitree.element import Element
from uitree.errors import TemplateError
from uitree.page import PAGE_DATA, PAGE_NAV, PAGE_TITLE, Page, strip_whitespace


@pytest.fixture()
def config(tmp_path: Path) -> UIConfig:
    return UIConfig(template_paths=[tmp_path])


def _nav() -> Element:
    return Element("menu", "main", "nav").add_children(
        [
            Element("link", "home", text="Home").add_attribute("href", "/"),
            Element("separator", "sep"),
            Element("link", "about", text="About").add_attribute("href", "/about"),
        ]
    )


def _content() -> Element:
    return Element("panel", "content", "card", "Welcome\n").add_children(
        [
            Element("text_input", "email", text="Email").add_attribute("placeholder", 'say "hi"'),
            Element("datetimeloc_input", "when", text="When"),
            Element("image", "logo", text="Logo").add_attribute("src", "/logo.png"),
        ]
    )


def test_page_data_accessors(config: UIConfig):
    nav = _nav()
    page = Page(config, "Home").set_data({"x": 1}).add_navigation(nav).add_page_data({"Extra": "e"})

    assert page.title == "Home"
    assert page.navigation is nav
    assert page.page_data[PAGE_DATA] == {"x": 1}
    assert page.page_data[PAGE_NAV] is nav
    assert page.page_data["Extra"] == "e"

    page.set_title("Other")
    assert page.page_data[PAGE_TITLE] == "Other"


def test_navigation_is_none_until_added(config: UIConfig):
    assert Page(config, "Home").navigation is None


def test_render_bundled_page(config: UIConfig):
    html = Page(config, "Demo").add_navigation(_nav()).set_data(_content()).render("page.html")
    soup = BeautifulSoup(html, "html.parser")

    assert soup.title.string == "Demo"
    assert soup.find("meta", attrs={"name": "viewport"})

    menu = soup.select_one("nav ul#main")
    assert menu["class"] == ["nav"]
    links = soup.select("nav ul#main li a")
    assert [link["href"] for link in links] == ["/", "/about"]
    assert [link.get_text() for link in links] == ["Home", "About"]
    assert soup.select_one("nav hr#sep") is not None

    panel = soup.find("div", id="content")
    assert panel["data-type"] == "panel"
    assert "Welcome" in panel.get_text()

    email = soup.find("input", id="email")
    assert email["type"] == "text"
    assert email["placeholder"] == 'say "hi"'
    assert soup.find("label", attrs={"for": "email"}).get_text() == "Email"
    assert soup.find("input", id="when")["type"] == "datetime-local"

    logo = soup.find("img", id="logo")
    assert logo["src"] == "/logo.png"
    assert logo["alt"] == "Logo"


def test_render_follows_child_order(config: UIConfig):
    nav = _nav().set_child_order("about", "home")

    soup = BeautifulSoup(Page(config, "Demo").add_navigation(nav).render("page.html"), "html.parser")

    assert [a["id"] for a in soup.select("nav a")] == ["about", "home"]


def test_text_is_escaped(config: UIConfig):
    data = Element("panel", "p", text="<script>alert(1)</script>")

    html = Page(config, "T").set_data(data).render("page.html")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_non_element_data_renders_as_text(config: UIConfig):
    html = Page(config, "T").set_data("plain payload").render("page.html")

    assert "plain payload" in html


def test_template_resolution_order(tmp_path: Path):
    (tmp_path / "home.html").write_text("home {{ Title }}", encoding="utf-8")
    (tmp_path / "custom.html").write_text("custom {{ Title }}", encoding="utf-8")
    config = UIConfig(template_paths=[tmp_path], homepage="home.html")

    assert Page(config, "A").render() == "home A"
    assert Page(config, "A", default_template="custom.html").render() == "custom A"
    assert Page(config, "A", default_template="custom.html").render("home.html") == "home A"


def test_added_templates_shadow_files(tmp_path: Path, config: UIConfig):
    (tmp_path / "greet.html").write_text("from file", encoding="utf-8")
    page = Page(config, "Test").add_template("greet.html", "{{ Title }}!")

    assert page.render("greet.html") == "Test!"


def test_added_template_can_use_element_macro(config: UIConfig):
    page = Page(config, "T").set_data(Element("link", "go", text="Go").add_attribute("href", "/go"))
    page.add_template(
        "snippet.html",
        '{% from "element.html" import render_element %}{{ render_element(Data) }}',
    )

    soup = BeautifulSoup(page.render("snippet.html"), "html.parser")

    assert soup.find("a", id="go")["href"] == "/go"


def test_invalid_template_source_raises(config: UIConfig):
    with pytest.raises(TemplateError):
        Page(config, "T").add_template("bad.html", "{% if %}")


@pytest.mark.parametrize(
    ("template_name", "source"),
    [("missing.html", None), ("strict.html", "{{ missing_value }}")],
)
def test_render_errors_raise_template_error(config: UIConfig, template_name: str, source):
    page = Page(config, "T")
    if source is not None:
        page.add_template(template_name, source)

    with pytest.raises(TemplateError) as excinfo:
        page.render(template_name)

    assert template_name in str(excinfo.value)


def test_strip_whitespace_filter(config: UIConfig):
    page = Page(config, "\n\tTitle\t\n").add_template("t.html", "[{{ Title | strip_whitespace }}]")

    assert page.render("t.html") == "[Title]"
    assert strip_whitespace("\t x \n") == " x "


def test_environment_is_cached_without_reload(config: UIConfig):
    page = Page(config, "T")

    assert page.jinja_env() is page.jinja_env()


def test_dynamic_reload_picks_up_template_changes(tmp_path: Path):
    template = tmp_path / "live.html"
    template.write_text("v1", encoding="utf-8")
    page = Page(UIConfig(template_paths=[tmp_path], dynamic_reload=True), "T")

    assert page.render("live.html") == "v1"
    template.write_text("v2", encoding="utf-8")
    assert page.render("live.html") == "v2"


def test_write(config: UIConfig, tmp_path: Path):
    out = Page(config, "Saved").add_template("s.html", "{{ Title }}").write(tmp_path / "out" / "index.html", "s.html")

    assert out.read_text(encoding="utf-8") == "Saved"
