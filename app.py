from flask import Flask, jsonify, Response
import os
from pathlib import Path
from dotenv import load_dotenv

from blueprint_diagram import OUTPUT_FILE

load_dotenv()

app = Flask(__name__)

# Viewer configuration
app.config['DIAGRAM_PATH'] = os.getenv('BLUEPRINT_DIAGRAM_PATH', OUTPUT_FILE)
HOST = os.getenv('BLUEPRINT_HOST', '127.0.0.1')
PORT = int(os.getenv('BLUEPRINT_PORT', '5000'))


def diagram_path():
    return Path(app.config['DIAGRAM_PATH'])


@app.route('/')
def index():
    try:
        path = diagram_path()
        if not path.is_file():
            return jsonify({'error': f'{path.name} has not been generated yet. Run blueprint-diagram first.'}), 404

        return Response(path.read_bytes(), mimetype='image/svg+xml')

    except Exception as e:
        print("Server Error:", str(e))
        return jsonify({'error': f'Server error: {str(e)}'}), 500


@app.route('/health')
def health():
    return jsonify({
        'status': 'ok',
        'diagram': diagram_path().is_file()
    })


if __name__ == '__main__':
    print("Viewer Configuration:")
    print(f"Diagram: {app.config['DIAGRAM_PATH']}")
    print(f"Address: http://{HOST}:{PORT}/")
    app.run(host=HOST, port=PORT, debug=os.getenv('FLASK_DEBUG') == '1')
