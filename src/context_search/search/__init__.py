"""
Context search engine package.

This package provides the in-memory search core:
- analyzers: Word-shape rules and case folding
- tokenizer: Lossless word/separator segmentation
- segment_index: Segment sequence and word postings
- context_window: Context window extraction around hits
"""
