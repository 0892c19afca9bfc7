"""
Admin blueprint initialization.
Assembles the console screens into one blueprint. Individual route logic is in:
- routes/dashboard.py - Dashboard statistics
- routes/packages.py - Safari package CRUD
- routes/hotels.py - Hotel + nearby attraction CRUD
- routes/destinations.py - Destination CRUD
- routes/bookings.py - Booking edit, status transitions, delete
- routes/inquiries.py - Inquiry status transitions, delete
- routes/reviews.py - Review moderation
- routes/users.py - Auth user metadata, bans, delete
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from blueprints.admin.routes import dashboard  # noqa: E402
from blueprints.admin.routes import packages  # noqa: E402
from blueprints.admin.routes import hotels  # noqa: E402
from blueprints.admin.routes import destinations  # noqa: E402
from blueprints.admin.routes import bookings  # noqa: E402
from blueprints.admin.routes import inquiries  # noqa: E402
from blueprints.admin.routes import reviews  # noqa: E402
from blueprints.admin.routes import users  # noqa: E402

dashboard.register_routes(admin_bp)
packages.register_routes(admin_bp)
hotels.register_routes(admin_bp)
destinations.register_routes(admin_bp)
bookings.register_routes(admin_bp)
inquiries.register_routes(admin_bp)
reviews.register_routes(admin_bp)
users.register_routes(admin_bp)
