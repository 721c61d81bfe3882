"""Create a HydroTrack account with default settings from the command line."""
import argparse

from werkzeug.security import generate_password_hash

from hydrotrack import create_app
from hydrotrack.services.achievements import ensure_achievements
from hydrotrack.storage import get_storage


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('username')
    parser.add_argument('password')
    args = parser.parse_args()

    if not 3 <= len(args.username) <= 50:
        parser.error('username must be 3-50 characters')
    if len(args.password) < 6:
        parser.error('password must be at least 6 characters')

    app = create_app()
    with app.app_context():
        storage = get_storage()
        if storage.get_user_by_username(args.username):
            print(f"User '{args.username}' already exists.")
            return

        user = storage.create_user(args.username, generate_password_hash(args.password))
        storage.get_or_create_settings(user.id)
        storage.get_or_create_reminder_settings(user.id)
        ensure_achievements(storage, user.id)
        print(f"User '{user.username}' created (id={user.id}).")


if __name__ == '__main__':
    main()
