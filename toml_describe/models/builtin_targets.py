"""Builtin rustc target triples and their cfg attributes.

One target per row, whitespace separated::

    triple  arch  vendor  os  env  abi  families  endian  pointer_width

``-`` marks an empty value; several families are comma separated.
"""

TARGET_TABLE = """
aarch64-apple-darwin                    aarch64      apple      macos        -        -          unix     little 64
aarch64-apple-ios                       aarch64      apple      ios          -        -          unix     little 64
aarch64-apple-ios-macabi                aarch64      apple      ios          -        macabi     unix     little 64
aarch64-apple-ios-sim                   aarch64      apple      ios          -        sim        unix     little 64
aarch64-apple-tvos                      aarch64      apple      tvos         -        -          unix     little 64
aarch64-apple-tvos-sim                  aarch64      apple      tvos         -        sim        unix     little 64
aarch64-apple-visionos                  aarch64      apple      visionos     -        -          unix     little 64
aarch64-apple-visionos-sim              aarch64      apple      visionos     -        sim        unix     little 64
aarch64-apple-watchos                   aarch64      apple      watchos      -        -          unix     little 64
aarch64-apple-watchos-sim               aarch64      apple      watchos      -        sim        unix     little 64
aarch64-kmc-solid_asp3                  aarch64      kmc        solid_asp3   -        -          -        little 64
aarch64-linux-android                   aarch64      unknown    android      -        -          unix     little 64
aarch64-nintendo-switch-freestanding    aarch64      nintendo   horizon      -        -          -        little 64
aarch64-pc-windows-gnullvm              aarch64      pc         windows      gnu      llvm       windows  little 64
aarch64-pc-windows-msvc                 aarch64      pc         windows      msvc     -          windows  little 64
aarch64-unknown-freebsd                 aarch64      unknown    freebsd      -        -          unix     little 64
aarch64-unknown-fuchsia                 aarch64      unknown    fuchsia      -        -          unix     little 64
aarch64-unknown-hermit                  aarch64      unknown    hermit       -        -          -        little 64
aarch64-unknown-illumos                 aarch64      unknown    illumos      -        -          unix     little 64
aarch64-unknown-linux-gnu               aarch64      unknown    linux        gnu      -          unix     little 64
aarch64-unknown-linux-gnu_ilp32         aarch64      unknown    linux        gnu      ilp32      unix     little 32
aarch64-unknown-linux-musl              aarch64      unknown    linux        musl     -          unix     little 64
aarch64-unknown-linux-ohos              aarch64      unknown    linux        ohos     -          unix     little 64
aarch64-unknown-netbsd                  aarch64      unknown    netbsd       -        -          unix     little 64
aarch64-unknown-none                    aarch64      unknown    none         -        -          -        little 64
aarch64-unknown-none-softfloat          aarch64      unknown    none         -        softfloat  -        little 64
aarch64-unknown-nto-qnx710              aarch64      unknown    nto          nto71    -          unix     little 64
aarch64-unknown-nuttx                   aarch64      unknown    nuttx        -        -          unix     little 64
aarch64-unknown-openbsd                 aarch64      unknown    openbsd      -        -          unix     little 64
aarch64-unknown-redox                   aarch64      unknown    redox        relibc   -          unix     little 64
aarch64-unknown-teeos                   aarch64      unknown    teeos        -        -          unix     little 64
aarch64-unknown-trusty                  aarch64      unknown    trusty       -        -          -        little 64
aarch64-unknown-uefi                    aarch64      unknown    uefi         -        -          -        little 64
aarch64-uwp-windows-msvc                aarch64      uwp        windows      msvc     uwp        windows  little 64
aarch64-wrs-vxworks                     aarch64      wrs        vxworks      gnu      -          unix     little 64
aarch64_be-unknown-linux-gnu            aarch64      unknown    linux        gnu      -          unix     big    64
aarch64_be-unknown-linux-gnu_ilp32      aarch64      unknown    linux        gnu      ilp32      unix     big    32
aarch64_be-unknown-netbsd               aarch64      unknown    netbsd       -        -          unix     big    64
arm-linux-androideabi                   arm          unknown    android      -        eabi       unix     little 32
arm-unknown-linux-gnueabi               arm          unknown    linux        gnu      eabi       unix     little 32
arm-unknown-linux-gnueabihf             arm          unknown    linux        gnu      eabihf     unix     little 32
arm-unknown-linux-musleabi              arm          unknown    linux        musl     eabi       unix     little 32
arm-unknown-linux-musleabihf            arm          unknown    linux        musl     eabihf     unix     little 32
arm64_32-apple-watchos                  aarch64      apple      watchos      -        -          unix     little 32
arm64e-apple-darwin                     aarch64      apple      macos        -        -          unix     little 64
arm64e-apple-ios                        aarch64      apple      ios          -        -          unix     little 64
arm64ec-pc-windows-msvc                 arm64ec      pc         windows      msvc     -          windows  little 64
armeb-unknown-linux-gnueabi             arm          unknown    linux        gnu      eabi       unix     big    32
armebv7r-none-eabi                      arm          unknown    none         -        eabi       -        big    32
armebv7r-none-eabihf                    arm          unknown    none         -        eabihf     -        big    32
armv4t-none-eabi                        arm          unknown    none         -        eabi       -        little 32
armv4t-unknown-linux-gnueabi            arm          unknown    linux        gnu      eabi       unix     little 32
armv5te-none-eabi                       arm          unknown    none         -        eabi       -        little 32
armv5te-unknown-linux-gnueabi           arm          unknown    linux        gnu      eabi       unix     little 32
armv5te-unknown-linux-musleabi          arm          unknown    linux        musl     eabi       unix     little 32
armv5te-unknown-linux-uclibceabi        arm          unknown    linux        uclibc   eabi       unix     little 32
armv6-unknown-freebsd                   arm          unknown    freebsd      gnu      eabihf     unix     little 32
armv6-unknown-netbsd-eabihf             arm          unknown    netbsd       -        eabihf     unix     little 32
armv6k-nintendo-3ds                     arm          nintendo   horizon      newlib   eabihf     unix     little 32
armv7-linux-androideabi                 arm          unknown    android      -        eabi       unix     little 32
armv7-sony-vita-newlibeabihf            arm          sony       vita         newlib   eabihf     unix     little 32
armv7-unknown-freebsd                   arm          unknown    freebsd      gnu      eabihf     unix     little 32
armv7-unknown-linux-gnueabi             arm          unknown    linux        gnu      eabi       unix     little 32
armv7-unknown-linux-gnueabihf           arm          unknown    linux        gnu      eabihf     unix     little 32
armv7-unknown-linux-musleabi            arm          unknown    linux        musl     eabi       unix     little 32
armv7-unknown-linux-musleabihf          arm          unknown    linux        musl     eabihf     unix     little 32
armv7-unknown-linux-ohos                arm          unknown    linux        ohos     eabi       unix     little 32
armv7-unknown-linux-uclibceabi          arm          unknown    linux        uclibc   eabi       unix     little 32
armv7-unknown-linux-uclibceabihf        arm          unknown    linux        uclibc   eabihf     unix     little 32
armv7-unknown-netbsd-eabihf             arm          unknown    netbsd       -        eabihf     unix     little 32
armv7-wrs-vxworks-eabihf                arm          wrs        vxworks      gnu      eabihf     unix     little 32
armv7a-kmc-solid_asp3-eabi              arm          kmc        solid_asp3   -        eabi       -        little 32
armv7a-kmc-solid_asp3-eabihf            arm          kmc        solid_asp3   -        eabihf     -        little 32
armv7a-none-eabi                        arm          unknown    none         -        eabi       -        little 32
armv7a-none-eabihf                      arm          unknown    none         -        eabihf     -        little 32
armv7k-apple-watchos                    arm          apple      watchos      -        -          unix     little 32
armv7r-none-eabi                        arm          unknown    none         -        eabi       -        little 32
armv7r-none-eabihf                      arm          unknown    none         -        eabihf     -        little 32
armv7s-apple-ios                        arm          apple      ios          -        -          unix     little 32
armv8r-none-eabihf                      arm          unknown    none         -        eabihf     -        little 32
avr-unknown-gnu-atmega328               avr          unknown    none         -        -          -        little 16
bpfeb-unknown-none                      bpf          unknown    none         -        -          -        big    64
bpfel-unknown-none                      bpf          unknown    none         -        -          -        little 64
csky-unknown-linux-gnuabiv2             csky         unknown    linux        gnu      abiv2      unix     little 32
csky-unknown-linux-gnuabiv2hf           csky         unknown    linux        gnu      abiv2hf    unix     little 32
hexagon-unknown-linux-musl              hexagon      unknown    linux        musl     -          unix     little 32
hexagon-unknown-none-elf                hexagon      unknown    none         -        -          -        little 32
i386-apple-ios                          x86          apple      ios          -        sim        unix     little 32
i586-pc-nto-qnx700                      x86          pc         nto          nto70    -          unix     little 32
i586-unknown-linux-gnu                  x86          unknown    linux        gnu      -          unix     little 32
i586-unknown-linux-musl                 x86          unknown    linux        musl     -          unix     little 32
i586-unknown-netbsd                     x86          unknown    netbsd       -        -          unix     little 32
i686-apple-darwin                       x86          apple      macos        -        -          unix     little 32
i686-linux-android                      x86          unknown    android      -        -          unix     little 32
i686-pc-windows-gnu                     x86          pc         windows      gnu      -          windows  little 32
i686-pc-windows-gnullvm                 x86          pc         windows      gnu      llvm       windows  little 32
i686-pc-windows-msvc                    x86          pc         windows      msvc     -          windows  little 32
i686-unknown-freebsd                    x86          unknown    freebsd      -        -          unix     little 32
i686-unknown-haiku                      x86          unknown    haiku        -        -          unix     little 32
i686-unknown-hurd-gnu                   x86          unknown    hurd         gnu      -          unix     little 32
i686-unknown-linux-gnu                  x86          unknown    linux        gnu      -          unix     little 32
i686-unknown-linux-musl                 x86          unknown    linux        musl     -          unix     little 32
i686-unknown-netbsd                     x86          unknown    netbsd       -        -          unix     little 32
i686-unknown-openbsd                    x86          unknown    openbsd      -        -          unix     little 32
i686-unknown-redox                      x86          unknown    redox        relibc   -          unix     little 32
i686-unknown-uefi                       x86          unknown    uefi         -        -          -        little 32
i686-uwp-windows-gnu                    x86          uwp        windows      gnu      uwp        windows  little 32
i686-uwp-windows-msvc                   x86          uwp        windows      msvc     uwp        windows  little 32
i686-win7-windows-msvc                  x86          win7       windows      msvc     -          windows  little 32
i686-wrs-vxworks                        x86          wrs        vxworks      gnu      -          unix     little 32
loongarch64-unknown-linux-gnu           loongarch64  unknown    linux        gnu      -          unix     little 64
loongarch64-unknown-linux-musl          loongarch64  unknown    linux        musl     -          unix     little 64
loongarch64-unknown-none                loongarch64  unknown    none         -        -          -        little 64
loongarch64-unknown-none-softfloat      loongarch64  unknown    none         -        softfloat  -        little 64
m68k-unknown-linux-gnu                  m68k         unknown    linux        gnu      -          unix     big    32
mips-unknown-linux-gnu                  mips         unknown    linux        gnu      -          unix     big    32
mips-unknown-linux-musl                 mips         unknown    linux        musl     -          unix     big    32
mips-unknown-linux-uclibc               mips         unknown    linux        uclibc   -          unix     big    32
mips64-openwrt-linux-musl               mips64       openwrt    linux        musl     abi64      unix     big    64
mips64-unknown-linux-gnuabi64           mips64       unknown    linux        gnu      abi64      unix     big    64
mips64-unknown-linux-muslabi64          mips64       unknown    linux        musl     abi64      unix     big    64
mips64el-unknown-linux-gnuabi64         mips64       unknown    linux        gnu      abi64      unix     little 64
mips64el-unknown-linux-muslabi64        mips64       unknown    linux        musl     abi64      unix     little 64
mipsel-sony-psp                         mips         sony       psp          -        -          -        little 32
mipsel-unknown-linux-gnu                mips         unknown    linux        gnu      -          unix     little 32
mipsel-unknown-linux-musl               mips         unknown    linux        musl     -          unix     little 32
mipsel-unknown-linux-uclibc             mips         unknown    linux        uclibc   -          unix     little 32
mipsel-unknown-netbsd                   mips         unknown    netbsd       -        -          unix     little 32
mipsel-unknown-none                     mips         unknown    none         -        -          -        little 32
mipsisa32r6-unknown-linux-gnu           mips32r6     unknown    linux        gnu      -          unix     big    32
mipsisa32r6el-unknown-linux-gnu         mips32r6     unknown    linux        gnu      -          unix     little 32
mipsisa64r6-unknown-linux-gnuabi64      mips64r6     unknown    linux        gnu      abi64      unix     big    64
mipsisa64r6el-unknown-linux-gnuabi64    mips64r6     unknown    linux        gnu      abi64      unix     little 64
msp430-none-elf                         msp430       unknown    none         -        -          -        little 16
nvptx64-nvidia-cuda                     nvptx64      nvidia     cuda         -        -          -        little 64
powerpc-unknown-freebsd                 powerpc      unknown    freebsd      -        -          unix     big    32
powerpc-unknown-linux-gnu               powerpc      unknown    linux        gnu      -          unix     big    32
powerpc-unknown-linux-gnuspe            powerpc      unknown    linux        gnu      spe        unix     big    32
powerpc-unknown-linux-musl              powerpc      unknown    linux        musl     -          unix     big    32
powerpc-unknown-linux-muslspe           powerpc      unknown    linux        musl     spe        unix     big    32
powerpc-unknown-netbsd                  powerpc      unknown    netbsd       -        -          unix     big    32
powerpc-unknown-openbsd                 powerpc      unknown    openbsd      -        -          unix     big    32
powerpc-wrs-vxworks                     powerpc      wrs        vxworks      gnu      -          unix     big    32
powerpc-wrs-vxworks-spe                 powerpc      wrs        vxworks      gnu      spe        unix     big    32
powerpc64-ibm-aix                       powerpc64    ibm        aix          -        vec-extabi unix     big    64
powerpc64-unknown-freebsd               powerpc64    unknown    freebsd      -        elfv2      unix     big    64
powerpc64-unknown-linux-gnu             powerpc64    unknown    linux        gnu      elfv1      unix     big    64
powerpc64-unknown-linux-musl            powerpc64    unknown    linux        musl     elfv2      unix     big    64
powerpc64-unknown-openbsd               powerpc64    unknown    openbsd      -        elfv2      unix     big    64
powerpc64-wrs-vxworks                   powerpc64    wrs        vxworks      gnu      elfv1      unix     big    64
powerpc64le-unknown-freebsd             powerpc64    unknown    freebsd      -        elfv2      unix     little 64
powerpc64le-unknown-linux-gnu           powerpc64    unknown    linux        gnu      elfv2      unix     little 64
powerpc64le-unknown-linux-musl          powerpc64    unknown    linux        musl     elfv2      unix     little 64
riscv32e-unknown-none-elf               riscv32      unknown    none         -        -          -        little 32
riscv32em-unknown-none-elf              riscv32      unknown    none         -        -          -        little 32
riscv32emc-unknown-none-elf             riscv32      unknown    none         -        -          -        little 32
riscv32gc-unknown-linux-gnu             riscv32      unknown    linux        gnu      -          unix     little 32
riscv32gc-unknown-linux-musl            riscv32      unknown    linux        musl     -          unix     little 32
riscv32i-unknown-none-elf               riscv32      unknown    none         -        -          -        little 32
riscv32im-risc0-zkvm-elf                riscv32      risc0      zkvm         -        -          -        little 32
riscv32im-unknown-none-elf              riscv32      unknown    none         -        -          -        little 32
riscv32ima-unknown-none-elf             riscv32      unknown    none         -        -          -        little 32
riscv32imac-esp-espidf                  riscv32      espressif  espidf       newlib   -          unix     little 32
riscv32imac-unknown-none-elf            riscv32      unknown    none         -        -          -        little 32
riscv32imac-unknown-xous-elf            riscv32      unknown    xous         -        -          -        little 32
riscv32imafc-esp-espidf                 riscv32      espressif  espidf       newlib   -          unix     little 32
riscv32imafc-unknown-none-elf           riscv32      unknown    none         -        -          -        little 32
riscv32imc-esp-espidf                   riscv32      espressif  espidf       newlib   -          unix     little 32
riscv32imc-unknown-none-elf             riscv32      unknown    none         -        -          -        little 32
riscv64-linux-android                   riscv64      unknown    android      -        -          unix     little 64
riscv64gc-unknown-freebsd               riscv64      unknown    freebsd      -        -          unix     little 64
riscv64gc-unknown-fuchsia               riscv64      unknown    fuchsia      -        -          unix     little 64
riscv64gc-unknown-hermit                riscv64      unknown    hermit       -        -          -        little 64
riscv64gc-unknown-linux-gnu             riscv64      unknown    linux        gnu      -          unix     little 64
riscv64gc-unknown-linux-musl            riscv64      unknown    linux        musl     -          unix     little 64
riscv64gc-unknown-netbsd                riscv64      unknown    netbsd       -        -          unix     little 64
riscv64gc-unknown-none-elf              riscv64      unknown    none         -        -          -        little 64
riscv64gc-unknown-openbsd               riscv64      unknown    openbsd      -        -          unix     little 64
riscv64imac-unknown-none-elf            riscv64      unknown    none         -        -          -        little 64
s390x-unknown-linux-gnu                 s390x        unknown    linux        gnu      -          unix     big    64
s390x-unknown-linux-musl                s390x        unknown    linux        musl     -          unix     big    64
sparc-unknown-linux-gnu                 sparc        unknown    linux        gnu      -          unix     big    32
sparc-unknown-none-elf                  sparc        unknown    none         -        -          -        big    32
sparc64-unknown-linux-gnu               sparc64      unknown    linux        gnu      -          unix     big    64
sparc64-unknown-netbsd                  sparc64      unknown    netbsd       -        -          unix     big    64
sparc64-unknown-openbsd                 sparc64      unknown    openbsd      -        -          unix     big    64
sparcv9-sun-solaris                     sparc64      sun        solaris      -        -          unix     big    64
thumbv4t-none-eabi                      arm          unknown    none         -        eabi       -        little 32
thumbv5te-none-eabi                     arm          unknown    none         -        eabi       -        little 32
thumbv6m-none-eabi                      arm          unknown    none         -        eabi       -        little 32
thumbv7a-pc-windows-msvc                arm          pc         windows      msvc     -          windows  little 32
thumbv7a-uwp-windows-msvc               arm          uwp        windows      msvc     uwp        windows  little 32
thumbv7em-none-eabi                     arm          unknown    none         -        eabi       -        little 32
thumbv7em-none-eabihf                   arm          unknown    none         -        eabihf     -        little 32
thumbv7m-none-eabi                      arm          unknown    none         -        eabi       -        little 32
thumbv7neon-linux-androideabi           arm          unknown    android      -        eabi       unix     little 32
thumbv7neon-unknown-linux-gnueabihf     arm          unknown    linux        gnu      eabihf     unix     little 32
thumbv7neon-unknown-linux-musleabihf    arm          unknown    linux        musl     eabihf     unix     little 32
thumbv8m.base-none-eabi                 arm          unknown    none         -        eabi       -        little 32
thumbv8m.main-none-eabi                 arm          unknown    none         -        eabi       -        little 32
thumbv8m.main-none-eabihf               arm          unknown    none         -        eabihf     -        little 32
wasm32-unknown-emscripten               wasm32       unknown    emscripten   -        -          unix,wasm little 32
wasm32-unknown-unknown                  wasm32       unknown    unknown      -        -          wasm     little 32
wasm32-wasi                             wasm32       unknown    wasi         -        -          wasm     little 32
wasm32-wasip1                           wasm32       unknown    wasi         p1       -          wasm     little 32
wasm32-wasip1-threads                   wasm32       unknown    wasi         p1       -          wasm     little 32
wasm32-wasip2                           wasm32       unknown    wasi         p2       -          wasm     little 32
wasm32v1-none                           wasm32       unknown    none         -        -          wasm     little 32
wasm64-unknown-unknown                  wasm64       unknown    unknown      -        -          wasm     little 64
x86_64-apple-darwin                     x86_64       apple      macos        -        -          unix     little 64
x86_64-apple-ios                        x86_64       apple      ios          -        sim        unix     little 64
x86_64-apple-ios-macabi                 x86_64       apple      ios          -        macabi     unix     little 64
x86_64-apple-tvos                       x86_64       apple      tvos         -        sim        unix     little 64
x86_64-apple-watchos-sim                x86_64       apple      watchos      -        sim        unix     little 64
x86_64-fortanix-unknown-sgx             x86_64       fortanix   unknown      sgx      fortanix   -        little 64
x86_64-linux-android                    x86_64       unknown    android      -        -          unix     little 64
x86_64-pc-nto-qnx710                    x86_64       pc         nto          nto71    -          unix     little 64
x86_64-pc-solaris                       x86_64       pc         solaris      -        -          unix     little 64
x86_64-pc-windows-gnu                   x86_64       pc         windows      gnu      -          windows  little 64
x86_64-pc-windows-gnullvm               x86_64       pc         windows      gnu      llvm       windows  little 64
x86_64-pc-windows-msvc                  x86_64       pc         windows      msvc     -          windows  little 64
x86_64-unikraft-linux-musl              x86_64       unikraft   linux        musl     -          unix     little 64
x86_64-unknown-dragonfly                x86_64       unknown    dragonfly    -        -          unix     little 64
x86_64-unknown-freebsd                  x86_64       unknown    freebsd      -        -          unix     little 64
x86_64-unknown-fuchsia                  x86_64       unknown    fuchsia      -        -          unix     little 64
x86_64-unknown-haiku                    x86_64       unknown    haiku        -        -          unix     little 64
x86_64-unknown-hermit                   x86_64       unknown    hermit       -        -          -        little 64
x86_64-unknown-hurd-gnu                 x86_64       unknown    hurd         gnu      -          unix     little 64
x86_64-unknown-illumos                  x86_64       unknown    illumos      -        -          unix     little 64
x86_64-unknown-l4re-uclibc              x86_64       unknown    l4re         uclibc   -          unix     little 64
x86_64-unknown-linux-gnu                x86_64       unknown    linux        gnu      -          unix     little 64
x86_64-unknown-linux-gnux32             x86_64       unknown    linux        gnu      x32        unix     little 32
x86_64-unknown-linux-musl               x86_64       unknown    linux        musl     -          unix     little 64
x86_64-unknown-linux-none               x86_64       unknown    linux        -        -          unix     little 64
x86_64-unknown-linux-ohos               x86_64       unknown    linux        ohos     -          unix     little 64
x86_64-unknown-netbsd                   x86_64       unknown    netbsd       -        -          unix     little 64
x86_64-unknown-none                     x86_64       unknown    none         -        -          -        little 64
x86_64-unknown-openbsd                  x86_64       unknown    openbsd      -        -          unix     little 64
x86_64-unknown-redox                    x86_64       unknown    redox        relibc   -          unix     little 64
x86_64-unknown-trusty                   x86_64       unknown    trusty       -        -          -        little 64
x86_64-unknown-uefi                     x86_64       unknown    uefi         -        -          -        little 64
x86_64-uwp-windows-gnu                  x86_64       uwp        windows      gnu      uwp        windows  little 64
x86_64-uwp-windows-msvc                 x86_64       uwp        windows      msvc     uwp        windows  little 64
x86_64-win7-windows-msvc                x86_64       win7       windows      msvc     -          windows  little 64
x86_64-wrs-vxworks                      x86_64       wrs        vxworks      gnu      -          unix     little 64
x86_64h-apple-darwin                    x86_64       apple      macos        -        -          unix     little 64
xtensa-esp32-espidf                     xtensa       espressif  espidf       newlib   -          unix     little 32
xtensa-esp32-none-elf                   xtensa       espressif  none         -        -          -        little 32
xtensa-esp32s2-espidf                   xtensa       espressif  espidf       newlib   -          unix     little 32
xtensa-esp32s2-none-elf                 xtensa       espressif  none         -        -          -        little 32
xtensa-esp32s3-espidf                   xtensa       espressif  espidf       newlib   -          unix     little 32
xtensa-esp32s3-none-elf                 xtensa       espressif  none         -        -          -        little 32
"""
