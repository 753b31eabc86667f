"""
Auth Blueprint
Login, logout and registration for the HTML front end
"""
from datetime import datetime
from urllib.parse import urlsplit

from flask import Blueprint, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user

from forms import LoginForm, RegistrationForm
from models import db, User

auth_bp = Blueprint('auth', __name__)


def _safe_next(target):
    # Only follow relative redirects back into this site
    if not target:
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return None
    return target


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('recipe.index'))

    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(username=form.username.data).first()
        if user and user.check_password(form.password.data):
            user.last_login = datetime.utcnow()
            db.session.commit()
            login_user(user)

            flash('Logged in successfully.', 'success')
            return redirect(_safe_next(request.args.get('next')) or url_for('recipe.index'))

        flash('Invalid credentials.', 'error')

    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    logout_user()
    flash('You have been logged out.', 'info')
    return redirect(url_for('recipe.index'))


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    if current_user.is_authenticated:
        return redirect(url_for('recipe.index'))

    form = RegistrationForm()
    if form.validate_on_submit():
        if User.query.filter_by(username=form.username.data).first():
            form.username.errors.append('User already exists')
        elif User.query.filter_by(email=form.email.data).first():
            form.email.errors.append('User already exists')
        else:
            user = User(username=form.username.data, email=form.email.data)
            user.set_password(form.password.data)
            db.session.add(user)
            db.session.commit()

            flash('User registered successfully. Please log in.', 'success')
            return redirect(url_for('auth.login'))

    return render_template('auth/register.html', form=form)
