"""On-disk catalog layout and file formats."""
