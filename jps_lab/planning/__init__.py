# jps_lab/planning/__init__.py
