#!/usr/bin/env python3
"""
UTC Time Converter - Web API Entry Point

Run this script to start the API server:
    python3 run_converter.py

Then POST to: http://127.0.0.1:3000/api/convert
"""

from flask_app import create_app
import os

app = create_app(os.getenv('FLASK_CONFIG', 'development'))

if __name__ == '__main__':
    # Get port from environment variable or use default
    port = int(os.getenv('PORT', 3000))

    print("\n" + "="*60)
    print("🌍 UTC Time Converter")
    print("="*60)
    print(f"\n🌐 API running at: http://127.0.0.1:{port}")
    print("\n💡 Press CTRL+C to stop the server\n")

    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=port)
