# Host package - window, input, rendering and the per-frame session loop
