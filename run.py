import eventlet
eventlet.monkey_patch()

import atexit  # noqa: E402
import os  # noqa: E402

from hydrotrack import create_app  # noqa: E402
from hydrotrack.extensions import scheduler, socketio  # noqa: E402
from hydrotrack.storage import get_storage  # noqa: E402

app = create_app()


@atexit.register
def shutdown():
    if scheduler.running:
        scheduler.shutdown(wait=False)
    with app.app_context():
        get_storage().close()


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    socketio.run(app, host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
