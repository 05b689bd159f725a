"""Inter-process communication: locked shared files, pipes and named pipes, and shared memory."""