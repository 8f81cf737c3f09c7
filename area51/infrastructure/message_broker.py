import simpy

from ..interfaces.event_sink import IEventSink


class MessageBroker(IEventSink):
    """
    Mediates event reporting between components within the simulation.

    Every published event is narrated on the console (unless quiet or the
    publisher marks it as diagnostic) and forwarded to the broadcast pipe
    that the EventRecorder listens on.
    """
    def __init__(self, env: simpy.Environment, quiet: bool = False):
        """
        Initialize the message broker

        Args:
            env (simpy.Environment): SimPy environment
            quiet (bool): Suppress console narration
        """
        self.env = env
        self.quiet = quiet
        self.broadcast_pipe = simpy.Store(self.env)

    def put(self, topic: str, message: dict, narrate: bool = True):
        """
        Publish (put) a message to the specified topic
        """
        message.setdefault('timestamp', self.env.now)
        if narrate and not self.quiet:
            print(f"{self.env.now:.2f} [{topic}] {message.get('text', message)}")
        return self.broadcast_pipe.put({'topic': topic, 'message': message})

    def get_broadcast_pipe(self) -> simpy.Store:
        """
        Returns the global broadcast pipe (consumed by EventRecorder)
        """
        return self.broadcast_pipe
