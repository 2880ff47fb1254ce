"""Core rule evaluation engine: classifier, detectors, and workspace scanner."""
