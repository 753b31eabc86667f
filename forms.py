from flask_wtf import FlaskForm
from wtforms import IntegerField, PasswordField, SelectField, SelectMultipleField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, EqualTo, Length, NumberRange, Regexp

from models import Tag

EMAIL_REGEX = r'^[\w\.-]+@[\w\.-]+\.\w+$'
PASSWORD_REGEX = r'^(?=.*[A-Za-z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$'


class RecipeForm(FlaskForm):
    title = StringField('Title', validators=[DataRequired(), Length(min=3, max=255)])
    description = TextAreaField('Description', validators=[DataRequired()])
    # Choices are filled in by the view from the category/tag services
    category_id = SelectField('Category', coerce=int, validators=[DataRequired()])
    tag_ids = SelectMultipleField('Tags', coerce=int)
    submit = SubmitField('Save')

    def set_choices(self, categories, tags):
        self.category_id.choices = [(c.id, c.title) for c in categories]
        self.tag_ids.choices = [(t.id, t.title) for t in tags]

    def populate_recipe(self, recipe):
        recipe.title = self.title.data
        recipe.description = self.description.data
        recipe.category_id = self.category_id.data
        tag_ids = self.tag_ids.data or []
        recipe.tags = Tag.query.filter(Tag.id.in_(tag_ids)).all() if tag_ids else []


class RatingForm(FlaskForm):
    score = IntegerField('Score', validators=[DataRequired(), NumberRange(min=1, max=5)])
    submit = SubmitField('Rate')


class DeleteForm(FlaskForm):
    submit = SubmitField('Delete')


class LoginForm(FlaskForm):
    username = StringField('Username', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])
    submit = SubmitField('Log in')


class RegistrationForm(FlaskForm):
    username = StringField('Username', validators=[
        DataRequired(), Length(min=3, max=50, message='Username must be at least 3 characters long')
    ])
    email = StringField('Email', validators=[
        DataRequired(), Length(max=120), Regexp(EMAIL_REGEX, message='Invalid email format')
    ])
    password = PasswordField('Password', validators=[
        DataRequired(),
        Regexp(PASSWORD_REGEX, message='Password must be at least 8 characters long, '
                                       'contain at least one number and one special character (@$%*?&).')
    ])
    confirm = PasswordField('Repeat password', validators=[
        DataRequired(), EqualTo('password', message='Passwords must match')
    ])
    submit = SubmitField('Register')
