"""
Library modules that implement the conversion of POSIX export statements. The parsing engine lives
in `fromposix.lib.posix`; the remaining modules provide rendering, configuration, and input
handling around it.
"""
