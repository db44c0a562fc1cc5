"""Compress files with LZ77 and Huffman coding, with optional byte-shift encryption."""

__version__ = "0.1.0"
__all__ = ["cipher", "lz77", "huffman_tree", "huffman_codec", "file_io", "cli"]