"""Lang Portal: vocabulary learning backend."""
