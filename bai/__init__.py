"""BAI policy compiler.

Compiles flat auditing configuration keys (OSGi Config Admin style) into a
PolicySet describing which runtime events are included in or excluded from
Business Activity Insight auditing.
"""

__version__ = "0.1.0"
