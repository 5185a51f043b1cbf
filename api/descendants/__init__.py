"""Descendants: individuals of the family tree (`family_descendant`)."""
