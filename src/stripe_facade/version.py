VERSION = "2.0.7"
