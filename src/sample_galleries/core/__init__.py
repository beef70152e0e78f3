"""Core query pipeline — normalization and convenience builders."""
