"""Entropy based smart cropping.

Submodules
----------
entropy
    Quantization and histogram entropy.
trim
    Edge trimming passes and the rectangle finder.
geometry
    Rectangle value type.
gravity
    Nine-way gravity and its classifier.
smart_crop
    ``SmartCropper`` crop operations.
resize
    Pillow crop / fill / scale helpers.
io_utils
    File I/O utilities and helpers.
batch
    Batch workflows used by the CLI.
"""
