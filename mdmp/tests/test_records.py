# Licensed under the GPLv3 - see LICENSE
import struct

import pytest
from astropy import units as u
from numpy.testing import assert_array_equal

from ..base.errors import DecodeError, OutOfBoundsError
from ..base.record import read_list
from ..codeview import CvInfoPdb70
from ..context import ContextX86, ContextAMD64, read_context_flags, select
from ..guid import GUID
from ..header import LocationDescriptor, MemoryDescriptor, MemoryDescriptor64
from ..records import (
    Thread, ThreadEx, VSFixedFileInfo, Module, UnloadedModuleListHeader,
    UnloadedModule, ExceptionRecord, ExceptionStream, MemoryInfoListHeader,
    MemoryInfo, ThreadInfoListHeader, ThreadInfo, HandleDataStream,
    HandleDescriptor, HandleDescriptor1, HandleDescriptor2, ThreadName,
    Memory64ListHeader, read_sized_list, read_handle_data,
    read_memory64_list)
from ..strings import MinidumpString
from ..system_info import SystemInfo


@pytest.mark.parametrize('cls, nbytes', (
    (Thread, 48), (ThreadEx, 64), (Module, 108), (VSFixedFileInfo, 52),
    (UnloadedModule, 24), (UnloadedModuleListHeader, 12),
    (ExceptionRecord, 152), (ExceptionStream, 168),
    (MemoryInfoListHeader, 16), (MemoryInfo, 48), (ThreadInfoListHeader, 12),
    (ThreadInfo, 64), (HandleDataStream, 16), (HandleDescriptor1, 32),
    (HandleDescriptor2, 40), (ThreadName, 12), (Memory64ListHeader, 16)))
def test_sizes(cls, nbytes):
    assert cls.nbytes == nbytes


class Buffer:
    """Helper to lay out blobs at known offsets."""
    def __init__(self):
        self.data = bytearray(b'\x00' * 64)

    def add(self, blob):
        offset = len(self.data)
        self.data += blob
        return offset

    def location(self, blob):
        return LocationDescriptor.fromvalues(data_size=len(blob),
                                             rva=self.add(blob))


class TestThread:
    def setup_class(self):
        buf = Buffer()
        self.stack = bytes(range(32))
        self.context = ContextX86.fromvalues(context_flags=0x7, eip=0x401234,
                                             esp=0x0012ff00)
        stack = MemoryDescriptor.fromvalues(start_of_memory_range=0x12fe00,
                                            memory=buf.location(self.stack))
        thread = Thread.fromvalues(
            thread_id=0x1a2b, suspend_count=1, priority=2, teb=0x7ffde000,
            stack=stack,
            thread_context=buf.location(self.context.tobytes()))
        self.list_rva = buf.add(struct.pack('<I', 1) + thread.tobytes())
        self.thread = thread
        self.data = bytes(buf.data)

    def test_list(self):
        threads = read_list(Thread, self.data, self.list_rva)
        assert threads == (self.thread,)
        thread = threads[0]
        assert thread['thread_id'] == 0x1a2b
        assert thread['teb'] == 0x7ffde000
        assert thread['stack']['start_of_memory_range'] == 0x12fe00

    def test_stack(self):
        assert self.thread.read_stack(self.data) == self.stack

    def test_context(self):
        tag = select(self.context['context_flags'])
        context = self.thread.read_context(self.data, tag)
        assert context == self.context
        assert context.instruction_pointer == 0x401234

    def test_context_amd64(self):
        buf = Buffer()
        context = ContextAMD64.fromvalues(context_flags=0x0b,
                                          rip=0x7ff612341000, rsp=0xe1f000)
        thread = Thread.fromvalues(
            thread_id=7, thread_context=buf.location(context.tobytes()))
        data = bytes(buf.data)
        info = SystemInfo.fromvalues(processor_architecture=9,
                                     platform_id=2)
        tag = info.context_architecture
        assert tag.name == 'CONTEXT_AMD64'
        decoded = thread.read_context(data, tag)
        assert decoded == context
        assert decoded.instruction_pointer == 0x7ff612341000
        # The flags only start after the home addresses.
        flags = read_context_flags(data, thread['thread_context'], tag)
        assert flags == 0x0010000b
        assert select(flags, platform_id=2) == tag
        assert thread.read_context(data, 0x00100000) == context

    def test_corrupt_context_location(self):
        thread = Thread.fromvalues(
            thread_id=1, thread_context=LocationDescriptor.fromvalues(
                data_size=716, rva=len(self.data) - 10))
        with pytest.raises(OutOfBoundsError):
            thread.read_context(self.data, 'CONTEXT_X86')
        # The thread itself is still fine.
        assert thread['thread_id'] == 1

    def test_thread_ex(self):
        backing = MemoryDescriptor.fromvalues(start_of_memory_range=0x5000)
        thread = ThreadEx.fromvalues(thread_id=3, backing_store=backing,
                                     **{k: v for k, v in self.thread.items()
                                        if k != 'thread_id'})
        assert thread['backing_store']['start_of_memory_range'] == 0x5000
        assert thread['stack'] == self.thread['stack']
        assert thread.read_stack(self.data) == self.stack


class TestModule:
    def setup_class(self):
        buf = Buffer()
        name_rva = buf.add(MinidumpString.fromvalue('C:\\app\\app.exe')
                           .tobytes() + b'\x00\x00')
        guid = GUID.fromvalues(data1=0x12345678, data2=0x9abc, data3=0xdef0,
                               data4=list(range(8)))
        cv = CvInfoPdb70.fromvalues(signature=guid, age=3,
                                    trailing=b'app.pdb\x00')
        version_info = VSFixedFileInfo.fromvalues(
            signature=0xfeef04bd, struc_version=0x10000,
            file_version_hi=(10 << 16), file_version_lo=(19041 << 16) | 1,
            product_version_hi=(10 << 16), product_version_lo=19041 << 16,
            file_os=0x40004, file_type=1)
        self.module = Module.fromvalues(
            base_of_image=0x400000, size_of_image=0x10000,
            time_date_stamp=1500000000, module_name_rva=name_rva,
            version_info=version_info, cv_record=buf.location(cv.tobytes()))
        self.list_rva = buf.add(struct.pack('<I', 1)
                                + self.module.tobytes())
        self.data = bytes(buf.data)

    def test_list(self):
        modules = read_list(Module, self.data, self.list_rva)
        assert modules == (self.module,)

    def test_name(self):
        assert self.module.read_name(self.data) == 'C:\\app\\app.exe'

    def test_image(self):
        assert self.module.end_of_image == 0x410000
        assert self.module.contains(0x400000)
        assert self.module.contains(0x40ffff)
        assert not self.module.contains(0x410000)
        assert self.module.time.isot == '2017-07-14T02:40:00.000'

    def test_version_info(self):
        info = self.module['version_info']
        assert info.is_valid
        assert info.file_version == (10, 0, 19041, 1)
        assert info.product_version == (10, 0, 19041, 0)
        assert info['file_os'].name == 'VOS_NT_WINDOWS32'
        assert info['file_type'].name == 'VFT_APP'
        assert not VSFixedFileInfo.fromvalues().is_valid

    def test_debug_record(self):
        record = self.module.read_debug_record(self.data)
        assert isinstance(record, CvInfoPdb70)
        assert record.pdb_file_name == 'app.pdb'
        assert record.identifier == '123456789ABCDEF000010203040506073'
        assert self.module.read_misc_record(self.data) is None

    def test_bad_name_rva(self):
        module = Module.fromvalues(module_name_rva=len(self.data) - 2)
        with pytest.raises(OutOfBoundsError):
            module.read_name(self.data)


class TestUnloadedModules:
    def make(self, size_of_entry, count=2):
        buf = Buffer()
        name_rva = buf.add(MinidumpString.fromvalue('old.dll').tobytes())
        self.modules = [UnloadedModule.fromvalues(
            base_of_image=0x10000000 * (i + 1), size_of_image=0x1000,
            module_name_rva=name_rva) for i in range(count)]
        header = UnloadedModuleListHeader.fromvalues(
            size_of_header=12, size_of_entry=size_of_entry,
            number_of_entries=count)
        padding = b'\xff' * (size_of_entry - 24)
        blob = header.tobytes() + b''.join(module.tobytes() + padding
                                           for module in self.modules)
        location = buf.location(blob)
        return bytes(buf.data), location

    def test_exact(self):
        data, location = self.make(24)
        header, modules = read_sized_list(UnloadedModuleListHeader,
                                          UnloadedModule, data, location)
        assert header['number_of_entries'] == 2
        assert modules == tuple(self.modules)
        assert modules[1].read_name(data) == 'old.dll'

    def test_larger_entries(self):
        data, location = self.make(32)
        header, modules = read_sized_list(UnloadedModuleListHeader,
                                          UnloadedModule, data, location)
        assert modules == tuple(self.modules)

    def test_entries_too_small(self):
        buf = Buffer()
        header = UnloadedModuleListHeader.fromvalues(
            size_of_header=12, size_of_entry=20, number_of_entries=1)
        location = buf.location(header.tobytes() + b'\x00' * 20)
        with pytest.raises(DecodeError):
            read_sized_list(UnloadedModuleListHeader, UnloadedModule,
                            bytes(buf.data), location)

    def test_count_beyond_region(self):
        buf = Buffer()
        header = UnloadedModuleListHeader.fromvalues(
            size_of_header=12, size_of_entry=24, number_of_entries=1000)
        location = buf.location(header.tobytes() + b'\x00' * 48)
        with pytest.raises(OutOfBoundsError):
            read_sized_list(UnloadedModuleListHeader, UnloadedModule,
                            bytes(buf.data), location)


class TestException:
    def setup_class(self):
        self.record = ExceptionRecord.fromvalues(
            exception_code=0xc0000005, exception_flags=0,
            exception_address=0x401234, number_parameters=2,
            exception_information=[1, 0xdeadbeef] + [0] * 13)
        self.stream = ExceptionStream.fromvalues(
            thread_id=0x1a2b, exception_record=self.record,
            thread_context=LocationDescriptor.fromvalues(data_size=716,
                                                         rva=0x100))

    def test_record(self):
        record = ExceptionStream.frombuffer(
            self.stream.tobytes())['exception_record']
        assert record == self.record
        assert_array_equal(record.parameters, [1, 0xdeadbeef])
        assert record['exception_address'] == 0x401234

    def test_windows(self):
        assert self.record.code_symbol(2).name == 'STATUS_ACCESS_VIOLATION'
        assert self.record.flags_symbol(2) == 0

    def test_linux(self):
        record = ExceptionRecord.fromvalues(exception_code=11,
                                            exception_flags=1)
        assert record.code_symbol(0x8201).name == 'SIGSEGV'
        assert record.flags_symbol(0x8201).name == 'SEGV_MAPERR'
        # Same raw code, other platform.
        assert record.code_symbol(2).name != 'SIGSEGV'

    def test_macos(self):
        record = ExceptionRecord.fromvalues(exception_code=1,
                                            exception_flags=1)
        assert record.code_symbol(0x8101).name == 'EXC_BAD_ACCESS'
        assert record.flags_symbol(0x8101).name == 'KERN_INVALID_ADDRESS'
        record = ExceptionRecord.fromvalues(exception_code=0x1234,
                                            exception_flags=5)
        flags = record.flags_symbol(0x8101)
        assert flags == 5 and type(flags) is int

    def test_context_location(self):
        assert self.stream['thread_context']['rva'] == 0x100


class TestMemoryInfo:
    def test_list(self):
        buf = Buffer()
        infos = [MemoryInfo.fromvalues(base_address=0x10000 * i,
                                       region_size=0x10000, state=0x1000,
                                       protect=protect, type=0x20000)
                 for i, protect in enumerate((0x04, 0x20, 0x01))]
        header = MemoryInfoListHeader.fromvalues(
            size_of_header=16, size_of_entry=48, number_of_entries=3)
        location = buf.location(header.tobytes() + b''.join(
            info.tobytes() for info in infos))
        header, entries = read_sized_list(MemoryInfoListHeader, MemoryInfo,
                                          bytes(buf.data), location)
        assert entries == tuple(infos)
        assert entries[0]['state'].name == 'MEM_COMMIT'
        assert entries[0]['type'].name == 'MEM_PRIVATE'
        assert entries[0]['protect'].name == 'PAGE_READWRITE'
        assert entries[0].is_writable and not entries[0].is_executable
        assert entries[1].is_executable and not entries[1].is_writable
        assert not entries[2].is_executable and not entries[2].is_writable


class TestThreadInfo:
    def test_times(self):
        info = ThreadInfo.fromvalues(
            thread_id=5, dump_flags=0x3, create_time=125911584000000000,
            kernel_time=15_000_000, user_time=0)
        assert info.created.isot == '2000-01-01T00:00:00.000'
        assert info.exited is None
        assert abs(info.kernel_duration - 1.5 * u.s) < 1 * u.ns
        assert info.user_duration == 0 * u.s
        assert info['dump_flags'] == 3

    def test_list(self):
        buf = Buffer()
        header = ThreadInfoListHeader.fromvalues(
            size_of_header=12, size_of_entry=64, number_of_entries=1)
        info = ThreadInfo.fromvalues(thread_id=7)
        location = buf.location(header.tobytes() + info.tobytes())
        _, entries = read_sized_list(ThreadInfoListHeader, ThreadInfo,
                                     bytes(buf.data), location)
        assert entries == (info,)


class TestHandles:
    def make(self, size):
        buf = Buffer()
        type_rva = buf.add(MinidumpString.fromvalue('File').tobytes())
        cls = HandleDescriptor.select_version(size)
        descriptors = [cls.fromvalues(handle=4 * (i + 1),
                                      type_name_rva=type_rva,
                                      handle_count=1)
                       for i in range(2)]
        header = HandleDataStream.fromvalues(
            size_of_header=16, size_of_descriptor=size,
            number_of_descriptors=2)
        location = buf.location(header.tobytes() + b''.join(
            d.tobytes() for d in descriptors))
        return bytes(buf.data), location, descriptors

    @pytest.mark.parametrize('size, cls', ((32, HandleDescriptor1),
                                           (40, HandleDescriptor2)))
    def test_versions(self, size, cls):
        data, location, descriptors = self.make(size)
        header, handles = read_handle_data(data, location)
        assert header['number_of_descriptors'] == 2
        assert all(type(handle) is cls for handle in handles)
        assert handles == tuple(descriptors)
        assert handles[1]['handle'] == 8
        assert handles[0].read_type_name(data) == 'File'
        assert handles[0].read_object_name(data) is None
        assert handles[0].declared_size == size

    def test_too_small(self):
        with pytest.raises(DecodeError):
            HandleDescriptor.select_version(24)

    def test_size_required(self):
        data, location, descriptors = self.make(32)
        with pytest.raises(TypeError):
            HandleDescriptor.frombuffer(data, location['rva'] + 16)
        handle = HandleDescriptor.frombuffer(data, location['rva'] + 16,
                                             discriminator=32)
        assert handle == descriptors[0]


class TestThreadNames:
    def test_names(self):
        buf = Buffer()
        name_rva = buf.add(MinidumpString.fromvalue('main').tobytes())
        name = ThreadName.fromvalues(thread_id=9, thread_name_rva=name_rva)
        rva = buf.add(struct.pack('<I', 1) + name.tobytes())
        names = read_list(ThreadName, bytes(buf.data), rva)
        assert names[0]['thread_id'] == 9
        assert names[0].read_name(bytes(buf.data)) == 'main'


class TestMemory64:
    def test_ranges(self):
        buf = Buffer()
        base_rva = buf.add(b'a' * 16 + b'b' * 32)
        descriptors = [
            MemoryDescriptor64.fromvalues(start_of_memory_range=0x1000,
                                          data_size=16),
            MemoryDescriptor64.fromvalues(start_of_memory_range=0x8000,
                                          data_size=32)]
        header = Memory64ListHeader.fromvalues(number_of_memory_ranges=2,
                                               base_rva=base_rva)
        location = buf.location(header.tobytes() + b''.join(
            d.tobytes() for d in descriptors))
        data = bytes(buf.data)
        header, ranges = read_memory64_list(data, location)
        assert [d for d, _ in ranges] == descriptors
        assert [rva for _, rva in ranges] == [base_rva, base_rva + 16]
        rva = ranges[1][1]
        assert data[rva:rva + 32] == b'b' * 32

    def test_memory_beyond_buffer(self):
        buf = Buffer()
        header = Memory64ListHeader.fromvalues(number_of_memory_ranges=1,
                                               base_rva=32)
        descriptor = MemoryDescriptor64.fromvalues(data_size=1 << 40)
        location = buf.location(header.tobytes() + descriptor.tobytes())
        with pytest.raises(OutOfBoundsError):
            read_memory64_list(bytes(buf.data), location)
