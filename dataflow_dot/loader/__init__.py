from dataflow_dot.loader.parser import load_graph, parse_text, parse_graph, detect_format

__all__ = ["load_graph", "parse_text", "parse_graph", "detect_format"]
