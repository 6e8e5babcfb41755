"""Thin wrappers around individual Flickr API methods."""
