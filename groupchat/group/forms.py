"""Forms validating the JSON bodies of the group blueprint."""

from flask_wtf import FlaskForm
from wtforms import Field, StringField
from wtforms.validators import DataRequired, Optional, ValidationError

CREATE_GROUP_REQUIRED = "Group name and at least one member are required"


def plain_text(form, field):
    """Reject JSON values that are not strings, such as numbers or objects."""
    if field.data is not None and not isinstance(field.data, str):
        raise ValidationError(f"{field.label.text} must be a string")


class IdListField(Field):
    """A list of user ids, read from a JSON array."""

    def process_formdata(self, valuelist):
        """Keep the non-blank ids, as strings, in request order."""
        ids = [str(value).strip() for value in valuelist if value is not None]
        self.data = [value for value in ids if value]

    def _value(self):
        return ",".join(self.data or [])


class GroupForm(FlaskForm):
    """Form for creating a new group."""

    name = StringField(
        "Group Name", validators=[DataRequired(message=CREATE_GROUP_REQUIRED)]
    )
    description = StringField("Description", validators=[Optional(), plain_text])
    members = IdListField(
        "Members", validators=[DataRequired(message=CREATE_GROUP_REQUIRED)]
    )
    groupPic = StringField("Group Picture", validators=[Optional(), plain_text])


class MemberForm(FlaskForm):
    """Form naming the user to add to or remove from a group."""

    userId = StringField(
        "User", validators=[DataRequired(message="User ID is required")]
    )
