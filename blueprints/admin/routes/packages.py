"""
Safari package routes.
"""

from flask import render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required
from utils.decorators import admin_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register safari package routes on the blueprint."""

    def render_form(package, mode):
        from models.package import DESTINATION_CATEGORIES, PACKAGE_CATEGORIES
        return render_template(
            'admin/packages/form.html',
            package=package,
            mode=mode,
            destination_categories=DESTINATION_CATEGORIES,
            package_categories=PACKAGE_CATEGORIES
        )

    @bp.route('/packages')
    @login_required
    @admin_required
    def list_packages():
        """List safari packages."""
        from models.package import get_all_packages, DESTINATION_CATEGORIES
        from blueprints.admin.services import filter_packages

        search = request.args.get('search', '').strip()
        category = request.args.get('category', '')

        try:
            packages = get_all_packages()
        except Exception as e:
            current_app.logger.error(f'Error fetching packages: {e}', exc_info=True)
            flash(MESSAGES['packages_load_failed'], 'error')
            packages = []

        return render_template(
            'admin/packages/list.html',
            packages=filter_packages(packages, search, category),
            total=len(packages),
            destination_categories=DESTINATION_CATEGORIES,
            filters={'search': search, 'category': category}
        )

    @bp.route('/packages/create', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def create_package_view():
        """Create a safari package."""
        from models.package import create_package
        from blueprints.admin.services import build_package_payload

        if request.method == 'POST':
            data = build_package_payload(request.form)
            try:
                create_package(data)
                flash(MESSAGES['package_created'], 'success')
                return redirect(url_for('admin.list_packages'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error creating package: {e}', exc_info=True)
                flash(MESSAGES['package_create_failed'], 'error')
            return render_form(data, 'create')

        return render_form(None, 'create')

    @bp.route('/packages/<package_id>/edit', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def edit_package_view(package_id):
        """Edit a safari package."""
        from models.package import get_package_by_id, update_package
        from blueprints.admin.services import build_package_payload

        package = get_package_by_id(package_id)
        if not package:
            flash(MESSAGES['package_not_found'], 'error')
            return redirect(url_for('admin.list_packages'))

        if request.method == 'POST':
            data = build_package_payload(request.form)
            try:
                if update_package(package_id, data) is None:
                    flash(MESSAGES['package_not_found'], 'error')
                else:
                    flash(MESSAGES['package_updated'], 'success')
                return redirect(url_for('admin.list_packages'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error updating package {package_id}: {e}', exc_info=True)
                flash(MESSAGES['package_update_failed'], 'error')
            return render_form({**data, 'id': package_id}, 'edit')

        return render_form(package, 'edit')

    @bp.route('/packages/<package_id>/featured', methods=['POST'])
    @login_required
    @admin_required
    def toggle_package_featured(package_id):
        """Flip a package's is_featured flag."""
        from models.package import get_package_by_id, set_package_featured

        try:
            package = get_package_by_id(package_id)
            if not package:
                flash(MESSAGES['package_not_found'], 'error')
            else:
                set_package_featured(package_id, not package.get('is_featured'))
                flash(MESSAGES['package_updated'], 'success')
        except Exception as e:
            current_app.logger.error(f'Error toggling featured on package {package_id}: {e}', exc_info=True)
            flash(MESSAGES['package_update_failed'], 'error')

        return redirect(url_for('admin.list_packages'))

    @bp.route('/packages/<package_id>/delete', methods=['POST'])
    @login_required
    @admin_required
    def delete_package_view(package_id):
        """Delete a safari package."""
        from models.package import delete_package

        try:
            if delete_package(package_id):
                flash(MESSAGES['package_deleted'], 'success')
            else:
                flash(MESSAGES['package_not_found'], 'error')
        except Exception as e:
            current_app.logger.error(f'Error deleting package {package_id}: {e}', exc_info=True)
            flash(MESSAGES['package_delete_failed'], 'error')

        return redirect(url_for('admin.list_packages'))
