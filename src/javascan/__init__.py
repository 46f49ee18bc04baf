"""
javascan – Find installed Java runtimes by walking the filesystem and PATH.
"""
from javascan.findings import JavaInfo, ScanReport
from javascan.scanner import scan_java, scan_java_async

__all__ = ["JavaInfo", "ScanReport", "scan_java", "scan_java_async"]
