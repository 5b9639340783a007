#!/usr/bin/env python3
"""
Development server for the sparse matrix API.
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from matrixcalc import create_app

app = create_app(os.environ.get('FLASK_CONFIG', 'development'))

if __name__ == '__main__':
    app.run(host=os.environ.get('HOST', '127.0.0.1'), port=int(os.environ.get('PORT', 3000)))
