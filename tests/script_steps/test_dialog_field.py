"""Tests for the dialog input field parameter."""

import pytest

from stepdoc.markup import DiagnosticKind, Diagnostics, ElementClose, ElementOpen, EventCursor
from stepdoc.script_steps import DialogFieldRecord, render_dialog_field

FIELD_TEMPLATE = """
<Parameter type="{role}">
    <Parameter type="Target">
        <Variable value="{variable}">
            <repetition>
                <Calculation datatype="1" position="32">
                    <Calculation>
                        <Text><![CDATA[1]]></Text>
                    </Calculation>
                </Calculation>
            </repetition>
        </Variable>
    </Parameter>
    <Boolean type="Password" value="{password}"></Boolean>
    <Parameter type="Label">
        <Calculation datatype="1" position="2">
            <Calculation>
                <Text><![CDATA[{label}]]></Text>
            </Calculation>
        </Calculation>
    </Parameter>
</Parameter>
"""


def field_xml(role="Field1", variable="$input1", password="False", label='"label1"'):
    return FIELD_TEMPLATE.format(role=role, variable=variable, password=password, label=label)


class TestDialogFieldDecode:
    """Test DialogFieldRecord.decode."""

    def test_field_with_variable_and_label(self, read_parameter):
        cursor, element = read_parameter(field_xml())

        field = DialogFieldRecord.decode(cursor, element)

        assert field.target == "$input1"
        assert field.label == '"label1"'
        assert not field.password
        assert field.display("Field1") == 'Input 1: $input1 ; Label 1: "label1"'

    def test_field_with_password(self, read_parameter):
        cursor, element = read_parameter(field_xml(password="True"))

        field = DialogFieldRecord.decode(cursor, element)

        assert field.password
        assert field.display("Field1") == 'Input 1: $input1 ; Label 1: "label1" ; Password'

    def test_field2_display(self, read_parameter):
        cursor, element = read_parameter(field_xml(role="Field2", variable="$input2", label='"second"'))

        field = DialogFieldRecord.decode(cursor, element)

        assert field.display("Field2") == 'Input 2: $input2 ; Label 2: "second"'

    def test_password_stays_true(self, read_parameter):
        cursor, element = read_parameter(
            """
            <Parameter type="Field1">
                <Boolean type="Password" value="True"></Boolean>
                <Boolean type="Password" value="False"></Boolean>
                <Boolean type="Password"></Boolean>
            </Parameter>
            """
        )

        assert DialogFieldRecord.decode(cursor, element).password

    def test_other_boolean_types_do_not_set_password(self, read_parameter):
        cursor, element = read_parameter(
            '<Parameter type="Field1"><Boolean type="Commit" value="True"></Boolean></Parameter>'
        )

        assert not DialogFieldRecord.decode(cursor, element).password

    def test_field_reference_target(self, read_parameter):
        cursor, element = read_parameter(
            """
            <Parameter type="Field3">
                <Parameter type="Target">
                    <Field table="Contacts" id="4" name="Email"></Field>
                </Parameter>
            </Parameter>
            """
        )

        field = DialogFieldRecord.decode(cursor, element)

        assert field.display("Field3") == "Input 3: Contacts::Email"

    def test_unknown_parameter_type_is_walked_over(self, read_parameter):
        opening = '<Parameter type="Field1">'
        field_body = field_xml().strip()[len(opening):]
        cursor, _ = read_parameter(
            f"""
            <ParameterValues>
                <Parameter type="Field1">
                    <Parameter type="Options">
                        <Parameter type="Nested"><Text><![CDATA[x]]></Text></Parameter>
                    </Parameter>
                    {field_body}
                <Parameter type="Field2"></Parameter>
            </ParameterValues>
            """
        )
        element = cursor.next_open()

        field = DialogFieldRecord.decode(cursor, element)

        assert field.target == "$input1"
        assert field.label == '"label1"'
        assert cursor.next_open() == ElementOpen("Parameter", {"type": "Field2"})

    def test_indented_label_is_trimmed(self, read_parameter):
        cursor, element = read_parameter(
            """
            <Parameter type="Field1">
                <Parameter type="Target"><Variable value="$a"></Variable></Parameter>
                <Parameter type="Label">
                    <Calculation>
                        <Text>
                            <![CDATA["L"]]>
                        </Text>
                    </Calculation>
                </Parameter>
            </Parameter>
            """
        )

        field = DialogFieldRecord.decode(cursor, element)

        assert field.display("Field1") == 'Input 1: $a ; Label 1: "L"'

    def test_mixed_content_label(self, read_parameter):
        cursor, element = read_parameter(
            '<Parameter type="Field1">'
            '<Parameter type="Target"><Variable value="$a"></Variable></Parameter>'
            '<Parameter type="Label"><Calculation><Text><![CDATA["L"]]><Field name="x"/></Text></Calculation></Parameter>'
            "</Parameter>"
        )

        assert DialogFieldRecord.decode(cursor, element).label == '"L"'

    def test_truncated_target_with_default_settings(self, read_parameter):
        diagnostics = Diagnostics()
        cursor, element = read_parameter('<Parameter type="Field1"><Parameter type="Target"><Variable value="$a">')

        field = DialogFieldRecord.decode(cursor, element, diagnostics)

        assert field.target is None
        assert field.display("Field1") is None
        assert diagnostics.of_kind(DiagnosticKind.TRUNCATED)
        assert diagnostics.of_kind(DiagnosticKind.DELEGATE_FAILED)

    def test_failed_target_leaves_target_absent(self):
        diagnostics = Diagnostics()
        cursor = EventCursor(
            [
                ElementOpen("Parameter", {"type": "Target"}),
                ElementOpen("Variable", {"value": "$cut"}),
            ]
        )

        field = DialogFieldRecord.decode(cursor, ElementOpen("Parameter", {"type": "Field1"}), diagnostics)

        assert field.target is None
        assert field.display("Field1") is None
        assert diagnostics.of_kind(DiagnosticKind.DELEGATE_FAILED)

    def test_failed_label_keeps_target(self):
        cursor = EventCursor(
            [
                ElementOpen("Parameter", {"type": "Target"}),
                ElementOpen("Variable", {"value": "$ok"}),
                ElementClose("Variable"),
                ElementClose("Parameter"),
                ElementOpen("Parameter", {"type": "Label"}),
                ElementOpen("Calculation"),
            ]
        )

        field = DialogFieldRecord.decode(cursor, ElementOpen("Parameter", {"type": "Field1"}))

        assert field.target == "$ok"
        assert field.label is None
        assert field.display("Field1") == "Input 1: $ok"


class TestDialogFieldRender:
    """Test render_dialog_field."""

    def test_no_target_renders_nothing(self):
        field = DialogFieldRecord(target=None, label='"x"', password=True)
        assert render_dialog_field(field, "Field1") is None

    def test_empty_label_is_omitted(self):
        field = DialogFieldRecord(target="$a", label="")
        assert render_dialog_field(field, "Field2") == "Input 2: $a"

    def test_password_without_label(self):
        field = DialogFieldRecord(target="$a", password=True)
        assert render_dialog_field(field, "Field3") == "Input 3: $a ; Password"

    @pytest.mark.parametrize("role", ["Field9", "Button1", ""])
    def test_unknown_role_numbers_as_placeholder(self, role):
        field = DialogFieldRecord(target="$a", label="L")
        assert render_dialog_field(field, role) == "Input ?: $a ; Label ?: L"
