"""
Launch the Huffman compressor Streamlit page.

    python frontend/run.py [--port 8501]
"""

import argparse
import subprocess
import sys
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(description="Run the Huffman compressor UI.")
    parser.add_argument("--port", type=int, default=8501, help="Port to serve on (default: 8501).")
    args = parser.parse_args()

    app_path = Path(__file__).parent / "app.py"
    print(f"Serving {app_path} at http://localhost:{args.port} (Ctrl+C to stop)")

    try:
        subprocess.run([
            "streamlit", "run", str(app_path),
            "--server.port", str(args.port),
            "--server.headless", "true",
            "--browser.gatherUsageStats", "false",
        ])
    except KeyboardInterrupt:
        print("\nShutting down server...")
    except FileNotFoundError:
        print("Error: Streamlit is not installed or not in PATH (pip install -e .[ui])")
        sys.exit(1)


if __name__ == "__main__":
    main()
