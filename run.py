#!/usr/bin/env python
"""
Development server entry point

Usage:
    python run.py

Listens on port 3000; PORT from the environment only shows up in the log.
"""

from app import create_app

LISTEN_PORT = 3000

if __name__ == '__main__':
    app = create_app()

    # Print registered routes for debugging
    print("\n=== Registered Routes ===")
    for rule in app.url_map.iter_rules():
        print(f"{rule.rule:40s} -> {rule.endpoint}")
    print("=" * 70)

    app.logger.info(f"Listening live at port {app.config['PORT']}")
    app.run(host='0.0.0.0', port=LISTEN_PORT, debug=app.config.get('DEBUG', False))
