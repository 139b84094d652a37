"""
Google Docs API layer: content model, index arithmetic, batch building and
the document editor façade.
"""
