from pathlib import Path

from graphviz import Digraph

GRAPH_NAME = 'aws'
OUTPUT_FILE = 'blueprint-diagram.svg'
OUTPUT_FORMAT = 'svg'


def build_graph():
    """Build the EC2 -> RDS blueprint graph"""
    # Create a new directed graph
    dot = Digraph(name=GRAPH_NAME)

    # Nodes
    dot.node('EC2', color='blue')
    dot.node('RDS', color='red', style='dotted')

    # Add edges
    dot.edge('EC2', 'RDS')

    return dot


def render_diagram(dot, path=OUTPUT_FILE):
    """Lay out the graph with dot and write the SVG to path.

    The engine output is collected before the file is opened, so a failed
    render never truncates an existing diagram.
    """
    svg = dot.pipe(format=OUTPUT_FORMAT)
    path = Path(path)
    path.write_bytes(svg)
    return path


def main():
    dot = build_graph()

    # Save the diagram
    render_diagram(dot, OUTPUT_FILE)
    print(f"Generated: {OUTPUT_FILE}")


if __name__ == '__main__':
    main()
