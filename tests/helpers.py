PASSWORD = 'secret-pass1!'


def flashes(client):
    """Flash messages queued in the client's session, as (category, message)."""
    with client.session_transaction() as session:
        return [tuple(flash) for flash in session.get('_flashes', [])]
