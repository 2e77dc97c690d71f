"""SecScope feature modules."""
