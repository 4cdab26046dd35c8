"""JobHub — search the JSearch job-listing API and inspect single jobs."""

__version__ = "0.1.0"
