"""
Web Interface for CSS Class Suggestions
HTTP adapter that lets an editor request class completions and switch packages.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, current_app, jsonify, request
from core.asset_locator import is_valid_package_name
from core.catalog_store import CatalogStore
from core.completion_provider import SUPPORTED_LANGUAGES, TRIGGER_CHARACTERS, provide_completion_items
from core.settings import Settings

logger = logging.getLogger(__name__)

def get_store() -> CatalogStore:
    return current_app.extensions['catalog_store']

def notifications_payload(notifications):
    return [n.to_dict() for n in notifications]

def create_app(settings: Optional[Settings] = None, store: Optional[CatalogStore] = None) -> Flask:
    """Build the Flask app and load the configured package once."""
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    app.config['SETTINGS'] = settings

    if store is None:
        store = CatalogStore(settings.project_root, settings.package_name)
        store.load()
    app.extensions['catalog_store'] = store

    @app.route('/')
    def index():
        """Report the active package and what the service accepts."""
        store = get_store()
        return jsonify({
            'package_name': store.package_name,
            'class_count': len(store.catalog),
            'languages': list(SUPPORTED_LANGUAGES),
            'trigger_characters': list(TRIGGER_CHARACTERS)
        })

    @app.route('/completions', methods=['POST'])
    def completions():
        """Return completion items for the text before the cursor."""
        try:
            data = request.get_json(silent=True) or {}
            line_prefix = data.get('line_prefix')
            if not isinstance(line_prefix, str):
                return jsonify({'error': 'line_prefix is required'}), 400
            language_id = data.get('language_id', 'html')

            items = provide_completion_items(get_store().catalog, line_prefix, language_id)
            if items is None:
                return jsonify({'items': None})
            return jsonify({'items': [item.to_dict() for item in items]})
        except Exception as e:
            logger.error(f"Error providing completions: {str(e)}", exc_info=True)
            return jsonify({'error': str(e)}), 500

    @app.route('/classes')
    def classes():
        """List the catalog in source order."""
        catalog = get_store().catalog
        return jsonify({
            'classes': [{'name': name, 'properties': properties} for name, properties in catalog.items()]
        })

    @app.route('/package', methods=['GET'])
    def get_package():
        return jsonify({'package_name': get_store().package_name})

    @app.route('/package', methods=['POST'])
    def set_package():
        """Switch to another npm package and rebuild the catalog."""
        try:
            data = request.get_json(silent=True) or {}
            package_name = data.get('package_name')
            if not isinstance(package_name, str) or not package_name.strip():
                return jsonify({'error': 'package_name is required'}), 400
            if not is_valid_package_name(package_name.strip()):
                return jsonify({'error': f'Invalid package name {package_name}'}), 400

            store = get_store()
            notifications = store.set_package(package_name)
            return jsonify({
                'package_name': store.package_name,
                'class_count': len(store.catalog),
                'notifications': notifications_payload(notifications)
            })
        except Exception as e:
            logger.error(f"Error switching package: {str(e)}", exc_info=True)
            return jsonify({'error': str(e)}), 500

    @app.route('/reload', methods=['POST'])
    def reload():
        """Rescan the active package."""
        store = get_store()
        notifications = store.load()
        return jsonify({
            'package_name': store.package_name,
            'class_count': len(store.catalog),
            'notifications': notifications_payload(notifications)
        })

    return app


if __name__ == '__main__':
    app = create_app()
    settings = app.config['SETTINGS']
    app.run(host=settings.host, port=settings.port, debug=False)
