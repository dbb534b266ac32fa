import pytest

from taghelpers import helpers
from taghelpers.config import HelperConfig


def test_text_field_variants(ctx):
    assert helpers.text_field(ctx, "first_name") == '<input name="first_name" type="text" />'
    assert (
        helpers.text_field(ctx, "first_name", "Default name", class_="user")
        == '<input class="user" name="first_name" type="text" value="Default name" />'
    )
    assert (
        helpers.number_field(ctx, "age", 25, id="foo", min=0, max=200)
        == '<input id="foo" max="200" min="0" name="age" type="number" value="25" />'
    )


@pytest.mark.parametrize("input_type", helpers.FIELD_TYPES)
def test_every_field_type_is_registered(ctx, input_type):
    helper = helpers.HELPERS[f"{input_type}_field"]
    assert helper(ctx, "x") == f'<input name="x" type="{input_type}" />'


def test_text_field_default_overridden_by_submission(make_ctx):
    assert (
        helpers.text_field(make_ctx(), "name", "Default")
        == '<input name="name" type="text" value="Default" />'
    )
    assert (
        helpers.text_field(make_ctx(params={"name": "X"}), "name", "Default")
        == '<input name="name" type="text" value="X" />'
    )


def test_field_type_cannot_be_overridden(ctx):
    assert helpers.email_field(ctx, "notify", type="text") == '<input name="notify" type="email" />'


def test_input_tag(make_ctx):
    ctx = make_ctx()
    assert helpers.input_tag(ctx, "first_name") == '<input name="first_name" />'
    assert (
        helpers.input_tag(ctx, "first_name", "Default name")
        == '<input name="first_name" value="Default name" />'
    )
    assert (
        helpers.input_tag(ctx, "employed", type="checkbox")
        == '<input name="employed" type="checkbox" />'
    )
    submitted = make_ctx(params={"employed": "on"})
    assert (
        helpers.input_tag(submitted, "employed", type="checkbox")
        == '<input name="employed" type="checkbox" value="" />'
    )


def test_check_box_round_trip(make_ctx):
    assert (
        helpers.check_box(make_ctx(params={"employed": ["1"]}), "employed", 1)
        == '<input checked="checked" name="employed" type="checkbox" value="1" />'
    )
    assert (
        helpers.check_box(make_ctx(params={"employed": ["0"]}), "employed", 1)
        == '<input name="employed" type="checkbox" value="1" />'
    )
    assert (
        helpers.check_box(make_ctx(), "employed", 1, disabled="disabled")
        == '<input disabled="disabled" name="employed" type="checkbox" value="1" />'
    )


def test_check_box_group_with_several_values(make_ctx):
    ctx = make_ctx(params={"pets": ["cat", "dog"]})
    assert "checked" in helpers.check_box(ctx, "pets", "dog")
    assert "checked" not in helpers.check_box(ctx, "pets", "fish")


def test_radio_button(make_ctx):
    ctx = make_ctx(params={"country": "france"})
    assert (
        helpers.radio_button(ctx, "country", "germany", id="foo")
        == '<input id="foo" name="country" type="radio" value="germany" />'
    )
    assert (
        helpers.radio_button(ctx, "country", "france")
        == '<input checked="checked" name="country" type="radio" value="france" />'
    )


def test_password_field_never_repopulates(make_ctx):
    ctx = make_ctx(params={"pass": "secret"}, errors={"pass": "too short"})
    assert (
        helpers.password_field(ctx, "pass", id="foo")
        == '<input class="field-with-error" id="foo" name="pass" type="password" />'
    )


def test_hidden_csrf_and_file_fields(ctx):
    assert helpers.hidden_field(ctx, "foo", "bar") == '<input name="foo" type="hidden" value="bar" />'
    assert (
        helpers.hidden_field(ctx, "foo", "bar", id="bar")
        == '<input id="bar" name="foo" type="hidden" value="bar" />'
    )
    assert helpers.csrf_field(ctx) == '<input name="csrf_token" type="hidden" value="fa6a08" />'
    assert helpers.file_field(ctx, "avatar", id="foo") == '<input id="foo" name="avatar" type="file" />'


def test_submit_button_labels(make_ctx):
    assert helpers.submit_button(make_ctx()) == '<input type="submit" value="Ok" />'
    assert helpers.submit_button(make_ctx(), "Ok!", id="foo") == '<input id="foo" type="submit" value="Ok!" />'
    custom = make_ctx(config=HelperConfig(submit_label="Send"))
    assert helpers.submit_button(custom) == '<input type="submit" value="Send" />'


def test_submit_button_ignores_submitted_params(make_ctx):
    ctx = make_ctx(params={"value": "other"})
    assert helpers.submit_button(ctx) == '<input type="submit" value="Ok" />'


def test_label_for(make_ctx):
    ctx = make_ctx()
    assert helpers.label_for(ctx, "first_name", "First name") == '<label for="first_name">First name</label>'
    assert (
        helpers.label_for(ctx, "first_name", "First name", class_="user")
        == '<label class="user" for="first_name">First name</label>'
    )
    assert (
        helpers.label_for(ctx, "first_name", caller=lambda: "<b>First</b> name")
        == '<label for="first_name"><b>First</b> name</label>'
    )
    failed = make_ctx(errors={"first_name": "required"})
    assert (
        helpers.label_for(failed, "first_name", "First name")
        == '<label class="field-with-error" for="first_name">First name</label>'
    )


def test_text_area(make_ctx):
    ctx = make_ctx()
    assert helpers.text_area(ctx, "foo") == '<textarea name="foo"></textarea>'
    assert helpers.text_area(ctx, "foo", cols=40) == '<textarea cols="40" name="foo"></textarea>'
    assert (
        helpers.text_area(ctx, "foo", "Default!", cols=40)
        == '<textarea cols="40" name="foo">Default!</textarea>'
    )
    assert (
        helpers.text_area(ctx, "foo", attrs={"cols": 40}, caller=lambda: "\n  Default!\n")
        == '<textarea cols="40" name="foo">\n  Default!\n</textarea>'
    )
    submitted = make_ctx(params={"foo": "<script>"}, errors={"foo": "bad"})
    assert (
        helpers.text_area(submitted, "foo", "Default!")
        == '<textarea class="field-with-error" name="foo">&lt;script&gt;</textarea>'
    )


def test_error_class_comes_from_config(make_ctx):
    ctx = make_ctx(errors={"age": "invalid"}, config=HelperConfig(error_class="is-invalid"))
    assert (
        helpers.text_field(ctx, "age", 250)
        == '<input class="is-invalid" name="age" type="text" value="250" />'
    )


def test_tag_and_tag_with_error_helpers(ctx):
    assert helpers.tag(ctx, "div") == "<div />"
    assert helpers.t(ctx, "div", "test & 123") == "<div>test &amp; 123</div>"
    assert (
        helpers.tag(ctx, "div", "test & 123", data={"my_id": 1, "Name": "test"})
        == '<div data-my-id="1" data-name="test">test &amp; 123</div>'
    )
    assert helpers.tag(ctx, "div", id="foo", caller=lambda: "test & 123") == '<div id="foo">test & 123</div>'
    assert helpers.tag_with_error(ctx, "input", class_="foo") == '<input class="foo field-with-error" />'


def test_attributes_named_like_arguments(ctx):
    assert helpers.tag(ctx, "input", name="q") == '<input name="q" />'
    assert helpers.tag(ctx, "p", content="x") == '<p content="x" />'
    assert helpers.text_field(ctx, "q", value="typed") == '<input name="q" type="text" value="typed" />'
    assert helpers.text_field(ctx, "q", name="other") == '<input name="q" type="text" />'
    assert helpers.submit_button(ctx, value="Go") == '<input type="submit" value="Go" />'
    assert (
        helpers.label_for(ctx, "q", "Query", name="label")
        == '<label for="q" name="label">Query</label>'
    )
