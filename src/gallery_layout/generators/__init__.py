"""Layout generators and the data types they produce."""
