"""Output adapters: page-flow layout and the fpdf2 painter."""
